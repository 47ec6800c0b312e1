"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the provider's opaque user id (string) — never a bare str in domain logic
    - UserCategory only ever moves away from ACTIVE through this service
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values are what the DB column and job payloads store
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
JobId = NewType("JobId", str)


# ─── Enums ───────────────────────────────────────────────────────

class UserCategory(str, Enum):
    """Persisted user status — maps to DB `users.category` column."""
    ACTIVE = "active"
    SUSPENDED = "suspended"
    REVOKED = "revoked"


class Locale(str, Enum):
    """Locales the welcome message is rendered in."""
    EN = "en"
    FR = "fr"


class OutcomeKind(str, Enum):
    """What a single provider error code means for the task."""
    FATAL = "fatal"
    USER_UNREACHABLE = "user_unreachable"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class Outcome:
    """Classified provider error. `category` is set only for USER_UNREACHABLE."""
    kind: OutcomeKind
    category: UserCategory | None = None


@dataclass(frozen=True)
class DmCredentials:
    """Send-capable credentials for the user's direct-message channel."""
    access_token: str

    def __repr__(self) -> str:
        return "DmCredentials(access_token=***)"
