"""Service test fixtures — fakes wired into a WelcomeMessageTask.

Invariants:
    - One shared CallLog per test, so ordering between collaborators is observable
    - Default user "1001" (@alice) exists with a token and English locale
"""

import pytest

from notifier.core.domain_types import UserId
from notifier.core.task_payload import WelcomeTask
from notifier.services.retry_scheduler import RetryScheduler
from notifier.services.send_welcome_message import WelcomeMessageTask
from notifier.services.user_status import UserStatusUpdater

from tests.fakes import CallLog, FakeSender, FakeTaskQueue, FakeUserRepository


@pytest.fixture
def log():
    return CallLog()


@pytest.fixture
def users(log):
    repo = FakeUserRepository(log)
    repo.add(UserId("1001"))
    return repo


@pytest.fixture
def queue(log):
    return FakeTaskQueue(log)


@pytest.fixture
def sender(log):
    return FakeSender(log)


@pytest.fixture
def welcome_task():
    return WelcomeTask(user_id=UserId("1001"), username="alice")


@pytest.fixture
def runner(users, queue, sender):
    return WelcomeMessageTask(
        users=users,
        sender=sender,
        status_updater=UserStatusUpdater(users),
        retry_scheduler=RetryScheduler(queue),
    )
