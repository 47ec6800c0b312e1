"""Retry Scheduler — tests for job shape, exact delay and failure mapping.

Tests cover:
    - Enqueued job mirrors the task and carries the reason code in its title
    - Delay passed through exactly (no jitter)
    - Any enqueue failure → RetrySchedulingError, enqueue attempted once
"""

import pytest

from notifier.core.errors import RetrySchedulingError
from notifier.core.task_payload import RETRY_DELAY_MS
from notifier.services.retry_scheduler import RetryScheduler


async def test_schedule_retry_enqueues_job(queue, welcome_task):
    job_id = await RetryScheduler(queue).schedule_retry(welcome_task, RETRY_DELAY_MS, 88)

    assert job_id == "job-1"
    job = queue.jobs[0]
    assert job.delay_ms == 900_000
    assert job.payload == {
        "userId": "1001",
        "username": "alice",
        "title": "Resend welcome message to @alice following an error 88",
    }


async def test_delay_is_exact(queue, welcome_task):
    for _ in range(5):
        await RetryScheduler(queue).schedule_retry(welcome_task, RETRY_DELAY_MS, 131)
    assert {job.delay_ms for job in queue.jobs} == {RETRY_DELAY_MS}


@pytest.mark.parametrize("failure", [
    RuntimeError("redis went away"),
    ConnectionResetError("reset by peer"),
])
async def test_enqueue_failure_is_not_retried(queue, welcome_task, log, failure):
    queue.fail_with = failure
    with pytest.raises(RetrySchedulingError) as exc_info:
        await RetryScheduler(queue).schedule_retry(welcome_task, RETRY_DELAY_MS, 130)
    assert exc_info.value.__cause__ is failure
    assert exc_info.value.context.job_type == "sendWelcomeMessage"
    assert len(log.of("enqueue")) == 1


async def test_successful_retry_is_logged(queue, welcome_task, caplog):
    with caplog.at_level("INFO"):
        await RetryScheduler(queue).schedule_retry(welcome_task, RETRY_DELAY_MS, 130)
    record = next(r for r in caplog.records if "retry" in r.getMessage())
    assert record.provider_code == 130
    assert record.delay_ms == 900_000


async def test_reason_code_is_required(queue, welcome_task, log):
    with pytest.raises(TypeError):
        await RetryScheduler(queue).schedule_retry(welcome_task, RETRY_DELAY_MS)
    assert log.of("enqueue") == []
