"""Welcome Strings — locale-specific text for the onboarding direct message.

Invariants:
    - All strings are pure data (no IO, no global locale state)
    - Covers every locale in Locale enum
    - Unknown or blank locale codes fall back to English
"""

from notifier.core.domain_types import Locale

DEFAULT_LOCALE = Locale.EN
WELCOME_EMOJI = "\U0001f64c"


_WELCOME_MESSAGE: dict[Locale, str] = {
    Locale.EN: (
        "All set, welcome to @unfollowNinja {emoji}!\n"
        "You will soon know all about your unfollowers here!"
    ),
    Locale.FR: (
        "Et voilà, bienvenue sur @unfollowNinja {emoji} !\n"
        "Vous serez bientôt informé(e) de vos unfollowers ici !"
    ),
}


def parse_locale(code: str | None) -> Locale:
    """Map a stored language code ('fr', 'fr-FR', 'EN') to a supported Locale."""
    if not code:
        return DEFAULT_LOCALE
    primary = code.strip().lower().replace("_", "-").split("-")[0]
    for locale in Locale:
        if locale.value == primary:
            return locale
    return DEFAULT_LOCALE


def render_welcome_message(locale: Locale) -> str:
    return _WELCOME_MESSAGE[locale].format(emoji=WELCOME_EMOJI)
