"""SQL Task Queue — TaskQueue that persists delayed jobs to `scheduled_jobs`.

Invariants:
    - enqueue() commits before returning; the returned JobId is the row id
    - run_at is computed from the exact delay (no jitter)
"""

from datetime import datetime, timedelta, timezone

from notifier.core.domain_types import JobId
from notifier.core.task_payload import RetryJob
from notifier.infrastructure.database import DatabaseSessionManager
from notifier.models.scheduled_job import ScheduledJob


class SqlTaskQueue:

    def __init__(self, manager: DatabaseSessionManager):
        self.manager = manager

    async def enqueue(self, job: RetryJob) -> JobId:
        now = datetime.now(timezone.utc)
        row = ScheduledJob(
            job_type=job.job_type,
            payload=dict(job.payload),
            delay_ms=job.delay_ms,
            run_at=now + timedelta(milliseconds=job.delay_ms),
            remove_on_complete=job.remove_on_complete,
            created_at=now,
        )
        async with self.manager.session() as db:
            db.add(row)
            await db.commit()
        return JobId(str(row.id))
