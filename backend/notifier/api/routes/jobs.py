"""Job Routes — the task scheduler delivers jobs here, one request per execution attempt.

Invariants:
    - POST /api/v1/jobs/{job_type} runs exactly one attempt and answers when it is done
    - 200 means handled (sent, user status updated, and/or retry scheduled)
    - Every failure surfaces as a NotifierError envelope via the global handlers
"""

from fastapi import APIRouter, Body, Depends

import notifier.infrastructure.database as db_module
from notifier.infrastructure.job_queue import SqlTaskQueue
from notifier.infrastructure.twitter_client import TwitterDirectMessageClient
from notifier.infrastructure.user_repository import SqlUserRepository
from notifier.schemas.job import JobResult
from notifier.services.task_dispatch import TaskDispatch

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])

# Singleton (initialized on startup)
dm_client: TwitterDirectMessageClient | None = None


def get_task_dispatch() -> TaskDispatch:
    """FastAPI dependency wiring the SQL adapters and the provider client."""
    manager = db_module.get_db_manager()
    if dm_client is None:
        raise RuntimeError("Messaging provider client not initialized")
    return TaskDispatch(
        users=SqlUserRepository(manager),
        queue=SqlTaskQueue(manager),
        sender=dm_client,
    )


@router.post("/{job_type}", response_model=JobResult)
async def run_job(
    job_type: str,
    payload: dict = Body(...),
    dispatch: TaskDispatch = Depends(get_task_dispatch),
):
    report = await dispatch.execute(job_type, payload)
    return JobResult(
        job_type=job_type,
        sent=report.sent,
        categories=[c.value for c in report.categories],
        retry_job_ids=[str(j) for j in report.retry_job_ids],
    )
