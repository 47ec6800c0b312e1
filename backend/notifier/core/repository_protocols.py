"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; core functions that
      consume their results stay synchronous
"""

from typing import Protocol

from notifier.core.domain_types import DmCredentials, JobId, UserCategory, UserId
from notifier.core.task_payload import RetryJob


class UserRepository(Protocol):
    """Contract for the user-record store — implemented by shell.

    Lookups return None when the user (or its token) is missing.
    set_category is an idempotent set.
    """
    async def get_credentials(self, user_id: UserId) -> DmCredentials | None: ...
    async def get_locale(self, user_id: UserId) -> str | None: ...
    async def set_category(self, user_id: UserId, category: UserCategory) -> None: ...


class TaskQueue(Protocol):
    """Contract for the task scheduler's enqueue operation — implemented by shell."""
    async def enqueue(self, job: RetryJob) -> JobId: ...


class DirectMessageSender(Protocol):
    """Contract for the messaging provider — implemented by shell.

    Raises ProviderRejection for structured provider errors and
    TransportError for everything else.
    """
    async def create_direct_message(
        self, credentials: DmCredentials, recipient_id: UserId, text: str,
    ) -> None: ...
