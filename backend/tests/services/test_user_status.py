"""User Status Updater — tests for idempotent category writes.

Tests cover:
    - Category is persisted through the repository
    - Repeated calls with the same value are harmless
    - Any category is written as a plain set (no transition guards)
"""

from notifier.core.domain_types import UserCategory, UserId
from notifier.services.user_status import UserStatusUpdater


async def test_set_category_persists(users, log):
    await UserStatusUpdater(users).set_category(UserId("1001"), UserCategory.SUSPENDED, "alice")
    assert users.users["1001"]["category"] is UserCategory.SUSPENDED
    assert log.of("set_category") == [("set_category", "1001", UserCategory.SUSPENDED)]


async def test_set_category_is_idempotent(users):
    updater = UserStatusUpdater(users)
    await updater.set_category(UserId("1001"), UserCategory.REVOKED)
    await updater.set_category(UserId("1001"), UserCategory.REVOKED)
    assert users.users["1001"]["category"] is UserCategory.REVOKED


async def test_set_category_has_no_transition_guard(users, log):
    users.add(UserId("1001"), category=UserCategory.SUSPENDED)
    await UserStatusUpdater(users).set_category(UserId("1001"), UserCategory.REVOKED)
    await UserStatusUpdater(users).set_category(UserId("1001"), UserCategory.ACTIVE)
    assert [c[2] for c in log.of("set_category")] == [
        UserCategory.REVOKED, UserCategory.ACTIVE,
    ]
