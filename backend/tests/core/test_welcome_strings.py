"""Welcome Strings tests — pure locale lookup and rendering.

Tests cover:
    - All locales render a non-empty message with the emoji
    - Locale parsing handles regions, case, blanks and unknown codes
"""

import pytest

from notifier.core.domain_types import Locale
from notifier.core.welcome_strings import (
    WELCOME_EMOJI, parse_locale, render_welcome_message,
)


def test_every_locale_renders():
    for locale in Locale:
        text = render_welcome_message(locale)
        assert WELCOME_EMOJI in text
        assert "@unfollowNinja" in text
        assert "{" not in text


def test_english_text():
    assert render_welcome_message(Locale.EN).startswith("All set, welcome to @unfollowNinja")


def test_french_text_differs_from_english():
    assert render_welcome_message(Locale.FR) != render_welcome_message(Locale.EN)


@pytest.mark.parametrize("code,expected", [
    ("en", Locale.EN),
    ("fr", Locale.FR),
    ("FR", Locale.FR),
    ("fr-CA", Locale.FR),
    ("fr_FR", Locale.FR),
    (" en ", Locale.EN),
    ("de", Locale.EN),
    ("", Locale.EN),
    (None, Locale.EN),
])
def test_parse_locale(code, expected):
    assert parse_locale(code) is expected
