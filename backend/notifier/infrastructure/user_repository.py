"""SQL User Repository — UserRepository backed by the `users` table.

Invariants:
    - Lookups return None for a missing user; get_credentials also for a missing token
    - set_category is a plain UPDATE (idempotent), updated_at refreshed
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select, update

from notifier.core.domain_types import DmCredentials, UserCategory, UserId
from notifier.infrastructure.database import DatabaseSessionManager
from notifier.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:

    def __init__(self, manager: DatabaseSessionManager):
        self.manager = manager

    async def get_credentials(self, user_id: UserId) -> DmCredentials | None:
        async with self.manager.session() as db:
            result = await db.execute(
                select(User.dm_access_token).where(User.id == user_id)
            )
            token = result.scalar_one_or_none()
        if not token:
            return None
        return DmCredentials(access_token=token)

    async def get_locale(self, user_id: UserId) -> str | None:
        async with self.manager.session() as db:
            result = await db.execute(select(User.lang).where(User.id == user_id))
            return result.scalar_one_or_none()

    async def set_category(self, user_id: UserId, category: UserCategory) -> None:
        async with self.manager.session() as db:
            result = await db.execute(
                update(User)
                .where(User.id == user_id)
                .values(category=category.value, updated_at=datetime.now(timezone.utc))
            )
            await db.commit()
        if result.rowcount == 0:
            logger.warning(
                f"set_category on missing user {user_id}",
                extra={"user_id": user_id, "category": category.value},
            )
