"""Job Schemas — Pydantic models for the payloads the task scheduler sends us.

Invariants:
    - Field names on the wire are camelCase (userId) to match the scheduler payload
    - userId and username are non-empty after stripping, and bounded by the
      `users` table columns (String(32) / String(50))
    - title is free text with no length bound
    - to_task() is the only way a validated payload becomes a WelcomeTask
"""

from pydantic import BaseModel, ConfigDict, Field

from notifier.core.domain_types import UserId
from notifier.core.task_payload import WelcomeTask


class WelcomeJobPayload(BaseModel):
    """Inbound sendWelcomeMessage payload."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    user_id: str = Field(alias="userId", min_length=1, max_length=32)
    username: str = Field(min_length=1, max_length=50)
    title: str | None = None

    def to_task(self) -> WelcomeTask:
        return WelcomeTask(
            user_id=UserId(self.user_id), username=self.username, title=self.title,
        )


class JobResult(BaseModel):
    """Response for a handled job."""
    status: str = "handled"
    job_type: str
    sent: bool
    categories: list[str] = []
    retry_job_ids: list[str] = []
