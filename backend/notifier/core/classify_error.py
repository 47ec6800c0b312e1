"""Error Classifier — maps a provider error code to the outcome that governs the task.

Invariants:
    - classify() is total: every int yields an Outcome (UNKNOWN by default)
    - USER_UNREACHABLE outcomes always carry a non-ACTIVE category
    - Fatal reasons name the root cause (credentials vs application suspended)

Design Decisions:
    - Lookup table over if/elif chain: the table is data and is tested as data
"""

from types import MappingProxyType

from notifier.core.domain_types import Outcome, OutcomeKind, UserCategory

# app-related
INVALID_CREDENTIALS = 32
APP_SUSPENDED = 416
# user-related
TOKEN_REVOKED = 89
USER_SUSPENDED = 64
ACCOUNT_LOCKED = 326
# provider-side
RATE_LIMITED = 88
OVER_CAPACITY = 130
INTERNAL_ERROR = 131

_FATAL = Outcome(OutcomeKind.FATAL)
_TRANSIENT = Outcome(OutcomeKind.TRANSIENT)
_UNKNOWN = Outcome(OutcomeKind.UNKNOWN)

OUTCOME_TABLE = MappingProxyType({
    INVALID_CREDENTIALS: _FATAL,
    APP_SUSPENDED: _FATAL,
    TOKEN_REVOKED: Outcome(OutcomeKind.USER_UNREACHABLE, UserCategory.REVOKED),
    ACCOUNT_LOCKED: Outcome(OutcomeKind.USER_UNREACHABLE, UserCategory.SUSPENDED),
    USER_SUSPENDED: Outcome(OutcomeKind.USER_UNREACHABLE, UserCategory.SUSPENDED),
    OVER_CAPACITY: _TRANSIENT,
    INTERNAL_ERROR: _TRANSIENT,
    RATE_LIMITED: _TRANSIENT,
})

_FATAL_REASONS = {
    INVALID_CREDENTIALS: (
        "Authentication problems. "
        "Please check that your consumer key & secret are correct."
    ),
    APP_SUSPENDED: "Oops, it looks like the application has been suspended :/...",
}


def classify(code: int) -> Outcome:
    """Classify one provider error code."""
    return OUTCOME_TABLE.get(code, _UNKNOWN)


def fatal_reason(code: int) -> str:
    """Human-readable root cause for a FATAL code."""
    return _FATAL_REASONS.get(code, f"Application-level provider failure (code {code}).")
