"""Provider Errors — typed view of the structured error list a messaging provider returns.

Invariants:
    - Entries keep the order the provider returned them in
    - parse_error_entries() returns None when the body carries no error list,
      so callers can tell provider rejections apart from transport garbage
    - An empty list is a valid (provider-shaped) rejection
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProviderErrorEntry:
    """One (code, message) pair from a provider error response."""
    code: int
    message: str


class ProviderRejection(Exception):
    """Raised by a DirectMessageSender when the provider answered with structured errors."""

    def __init__(self, entries: list[ProviderErrorEntry], status_code: int | None = None):
        codes = ", ".join(str(e.code) for e in entries) or "none"
        super().__init__(f"Provider rejected request (codes: {codes})")
        self.entries = list(entries)
        self.status_code = status_code


def parse_error_entries(body: Any) -> list[ProviderErrorEntry] | None:
    """Extract `{"errors": [{"code", "message"}, ...]}` from a decoded JSON body."""
    if not isinstance(body, dict):
        return None
    raw = body.get("errors")
    if not isinstance(raw, list):
        return None

    entries = []
    for item in raw:
        if not isinstance(item, dict):
            return None
        code = item.get("code")
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        entries.append(ProviderErrorEntry(code=code, message=str(item.get("message", ""))))
    return entries
