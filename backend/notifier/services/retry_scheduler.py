"""Retry Scheduler — re-enqueues a welcome task after a transient provider failure.

Invariants:
    - Retry job is SEND_WELCOME_MESSAGE with the same userId/username
    - Delay is exact (no jitter) and flagged remove_on_complete
    - An enqueue failure raises RetrySchedulingError and is never retried
"""

import logging

from notifier.core.domain_types import JobId
from notifier.core.errors import ErrorContext, RetrySchedulingError
from notifier.core.repository_protocols import TaskQueue
from notifier.core.task_payload import WelcomeTask, build_retry_job

logger = logging.getLogger(__name__)


class RetryScheduler:
    """Thin wrapper over TaskQueue.enqueue with failure mapping."""

    def __init__(self, queue: TaskQueue):
        self.queue = queue

    async def schedule_retry(
        self, task: WelcomeTask, delay_ms: int, reason_code: int,
    ) -> JobId:
        job = build_retry_job(task, reason_code, delay_ms)
        ctx = ErrorContext(
            user_id=task.user_id, username=task.username, job_type=job.job_type,
        )
        try:
            job_id = await self.queue.enqueue(job)
        except Exception as e:
            logger.error(
                f"Enqueue of {job.job_type} retry failed: {e}",
                extra={"user_id": task.user_id, "provider_code": reason_code},
            )
            raise RetrySchedulingError(str(e), reason_code, ctx) from e

        logger.info(
            f"Scheduled welcome message retry for @{task.username} in {delay_ms}ms",
            extra={
                "user_id": task.user_id, "username": task.username,
                "provider_code": reason_code, "delay_ms": delay_ms,
                "job_type": job.job_type,
            },
        )
        return job_id
