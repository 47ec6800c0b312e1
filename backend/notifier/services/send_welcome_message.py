"""Welcome Message Task — sends the onboarding DM and reacts to provider errors.

Invariants:
    - User context is resolved before the provider is contacted; failure → UserResolutionError
    - Only ProviderRejection is classified; any other send failure propagates unchanged
    - Error entries are handled sequentially, in provider order
    - First FATAL or UNKNOWN entry raises and stops; side effects already applied stay applied
    - USER_UNREACHABLE and TRANSIENT never raise (unless the side effect itself fails)

Design Decisions:
    - Locale passed explicitly to render_welcome_message (no shared i18n state)
    - match on OutcomeKind over nested ifs: one branch per classifier outcome
"""

import logging
from dataclasses import dataclass, field

from notifier.core.classify_error import classify, fatal_reason
from notifier.core.domain_types import DmCredentials, JobId, Locale, OutcomeKind, UserCategory
from notifier.core.errors import (
    DatabaseError, ErrorContext, FatalProviderError,
    UnknownProviderError, UserResolutionError,
)
from notifier.core.provider_errors import ProviderErrorEntry, ProviderRejection
from notifier.core.repository_protocols import DirectMessageSender, UserRepository
from notifier.core.task_payload import RETRY_DELAY_MS, WelcomeTask
from notifier.core.welcome_strings import parse_locale, render_welcome_message
from notifier.services.retry_scheduler import RetryScheduler
from notifier.services.user_status import UserStatusUpdater

logger = logging.getLogger(__name__)


@dataclass
class TaskReport:
    """What a successful run did. `sent` is False when provider errors were handled."""
    sent: bool = True
    categories: list[UserCategory] = field(default_factory=list)
    retry_job_ids: list[JobId] = field(default_factory=list)


class WelcomeMessageTask:
    """Orchestrates one welcome-message attempt for one user."""

    def __init__(
        self,
        users: UserRepository,
        sender: DirectMessageSender,
        status_updater: UserStatusUpdater,
        retry_scheduler: RetryScheduler,
    ):
        self.users = users
        self.sender = sender
        self.status_updater = status_updater
        self.retry_scheduler = retry_scheduler

    async def run(self, task: WelcomeTask) -> TaskReport:
        credentials, locale = await self._resolve_user(task)
        text = render_welcome_message(locale)

        try:
            await self.sender.create_direct_message(credentials, task.user_id, text)
        except ProviderRejection as rejection:
            return await self._handle_provider_errors(task, rejection.entries)

        logger.info(
            f"Welcome message sent to @{task.username}",
            extra={"user_id": task.user_id, "username": task.username},
        )
        return TaskReport()

    async def _resolve_user(self, task: WelcomeTask) -> tuple[DmCredentials, Locale]:
        """Load credentials + locale. Never classified — a missing user is a precondition failure."""
        ctx = ErrorContext(user_id=task.user_id, username=task.username)
        try:
            credentials = await self.users.get_credentials(task.user_id)
            lang = await self.users.get_locale(task.user_id)
        except DatabaseError as e:
            raise UserResolutionError(task.user_id, e.message, ctx) from e

        if lang is None:
            raise UserResolutionError(task.user_id, "user record not found", ctx)
        if credentials is None:
            raise UserResolutionError(task.user_id, "no direct-message credentials", ctx)
        return credentials, parse_locale(lang)

    async def _handle_provider_errors(
        self, task: WelcomeTask, entries: list[ProviderErrorEntry],
    ) -> TaskReport:
        report = TaskReport(sent=False)
        for entry in entries:
            outcome = classify(entry.code)
            ctx = ErrorContext(
                user_id=task.user_id, username=task.username,
                debug_info={"provider_message": entry.message},
            )
            match outcome.kind:
                case OutcomeKind.FATAL:
                    logger.error(
                        f"Fatal provider error {entry.code} while welcoming @{task.username}",
                        extra={"user_id": task.user_id, "provider_code": entry.code},
                    )
                    raise FatalProviderError(entry.code, fatal_reason(entry.code), ctx)
                case OutcomeKind.USER_UNREACHABLE:
                    await self.status_updater.set_category(
                        task.user_id, outcome.category, task.username,
                    )
                    report.categories.append(outcome.category)
                case OutcomeKind.TRANSIENT:
                    job_id = await self.retry_scheduler.schedule_retry(
                        task, RETRY_DELAY_MS, entry.code,
                    )
                    report.retry_job_ids.append(job_id)
                case _:
                    logger.error(
                        f"Unmapped provider error {entry.code}: {entry.message}",
                        extra={"user_id": task.user_id, "provider_code": entry.code},
                    )
                    raise UnknownProviderError(entry.code, entry.message, ctx)
        return report
