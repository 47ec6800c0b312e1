"""User ORM — the slice of the user record this service reads and writes.

Invariants:
    - id is the provider's user id (string primary key, not generated here)
    - category is one of UserCategory values; only this column is ever written here
    - dm_access_token nullable: users without one cannot be messaged
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from notifier.core.domain_types import UserCategory
from notifier.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserCategory.ACTIVE.value,
    )
    lang: Mapped[str] = mapped_column(String(10), nullable=False, default="en")
    dm_access_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
