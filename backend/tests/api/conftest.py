"""API test fixtures — FastAPI client with TaskDispatch wired to in-memory fakes.

Invariants:
    - get_task_dispatch overridden; no DB or provider client is touched
    - Lifespan is not run (ASGITransport does not send lifespan events)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from notifier.api.routes.jobs import get_task_dispatch
from notifier.core.domain_types import UserId
from notifier.main import app
from notifier.services.task_dispatch import TaskDispatch

from tests.fakes import CallLog, FakeSender, FakeTaskQueue, FakeUserRepository


@pytest.fixture
def fakes():
    log = CallLog()
    users = FakeUserRepository(log)
    users.add(UserId("1001"))
    return {
        "log": log,
        "users": users,
        "queue": FakeTaskQueue(log),
        "sender": FakeSender(log),
    }


@pytest.fixture
async def client(fakes):
    dispatch = TaskDispatch(
        users=fakes["users"], queue=fakes["queue"], sender=fakes["sender"],
    )
    app.dependency_overrides[get_task_dispatch] = lambda: dispatch

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
