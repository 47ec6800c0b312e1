"""Task Dispatch — explicit routing from job type to task runner.

Invariants:
    - Every job_type -> runner mapping is visible; no getattr magic, no auto-discovery
    - Unknown job types raise UnknownTaskTypeError
    - Payloads are validated before any collaborator is touched
    - Runners are built per dispatcher with shared collaborators
"""

import logging
from collections.abc import Awaitable, Callable

from pydantic import ValidationError

from notifier.core.errors import InvalidTaskPayloadError, UnknownTaskTypeError
from notifier.core.repository_protocols import DirectMessageSender, TaskQueue, UserRepository
from notifier.core.task_payload import SEND_WELCOME_MESSAGE
from notifier.schemas.job import WelcomeJobPayload
from notifier.services.retry_scheduler import RetryScheduler
from notifier.services.send_welcome_message import TaskReport, WelcomeMessageTask
from notifier.services.user_status import UserStatusUpdater

logger = logging.getLogger(__name__)

Runner = Callable[[dict], Awaitable[TaskReport]]


class TaskDispatch:
    """Routes job_type -> runner. Explicit registration, no auto-discovery."""

    def __init__(
        self, users: UserRepository, queue: TaskQueue, sender: DirectMessageSender,
    ):
        self.welcome = WelcomeMessageTask(
            users=users,
            sender=sender,
            status_updater=UserStatusUpdater(users),
            retry_scheduler=RetryScheduler(queue),
        )
        self._runners: dict[str, Runner] = {
            SEND_WELCOME_MESSAGE: self._run_welcome,
        }

    @property
    def job_types(self) -> frozenset[str]:
        return frozenset(self._runners)

    async def execute(self, job_type: str, payload: dict) -> TaskReport:
        runner = self._runners.get(job_type)
        if runner is None:
            raise UnknownTaskTypeError(job_type)
        logger.info(f"Running {job_type} job", extra={"job_type": job_type})
        return await runner(payload)

    async def _run_welcome(self, payload: dict) -> TaskReport:
        try:
            parsed = WelcomeJobPayload.model_validate(payload)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
            )
            raise InvalidTaskPayloadError(SEND_WELCOME_MESSAGE, f"invalid fields: {fields}")
        return await self.welcome.run(parsed.to_task())
