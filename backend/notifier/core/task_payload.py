"""Task Payloads — the work item a scheduler hands us and the retry job we hand back.

Invariants:
    - WelcomeTask is immutable; a retry is a new WelcomeTask, never a mutation
    - Retry jobs always use SEND_WELCOME_MESSAGE, RETRY_DELAY_MS and remove_on_complete=True
    - Retry payload keys match the inbound payload keys (userId, username, title)
"""

from dataclasses import dataclass, field
from typing import Any

from notifier.core.domain_types import UserId

SEND_WELCOME_MESSAGE = "sendWelcomeMessage"
RETRY_DELAY_MS = 15 * 60 * 1000


@dataclass(frozen=True)
class WelcomeTask:
    """One attempt at sending the welcome message to a user."""
    user_id: UserId
    username: str
    title: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"userId": self.user_id, "username": self.username}
        if self.title is not None:
            payload["title"] = self.title
        return payload


@dataclass(frozen=True)
class RetryJob:
    """Job description handed to the task scheduler."""
    job_type: str
    payload: dict[str, Any] = field(default_factory=dict)
    delay_ms: int = RETRY_DELAY_MS
    remove_on_complete: bool = True


def retry_title(username: str, code: int) -> str:
    return f"Resend welcome message to @{username} following an error {code}"


def build_retry_job(task: WelcomeTask, code: int, delay_ms: int = RETRY_DELAY_MS) -> RetryJob:
    """Build the delayed re-send job for a task that hit a transient provider error."""
    retry = WelcomeTask(
        user_id=task.user_id,
        username=task.username,
        title=retry_title(task.username, code),
    )
    return RetryJob(
        job_type=SEND_WELCOME_MESSAGE,
        payload=retry.to_payload(),
        delay_ms=delay_ms,
        remove_on_complete=True,
    )
