"""ORM Models — import every model so Base.metadata is complete."""

from notifier.models.user import User
from notifier.models.scheduled_job import ScheduledJob

__all__ = ["User", "ScheduledJob"]
