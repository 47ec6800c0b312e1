"""User Status Updater — persists a user's category when they can no longer be messaged.

Invariants:
    - set_category is an idempotent set; calling it twice with the same value is safe
    - Plain set with no transition guards; which categories get written is
      decided by the classifier table, which never yields ACTIVE
"""

import logging

from notifier.core.domain_types import UserCategory, UserId
from notifier.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


class UserStatusUpdater:
    """Applies category changes decided by the error classifier."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def set_category(
        self, user_id: UserId, category: UserCategory, username: str | None = None,
    ) -> None:
        logger.warning(
            f"@{username or user_id} is {category.value}. removing them from the list...",
            extra={"user_id": user_id, "username": username, "category": category.value},
        )
        await self.users.set_category(user_id, category)
