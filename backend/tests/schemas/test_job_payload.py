"""Job Payload schema — tests for camelCase parsing and whitespace handling."""

import pytest
from pydantic import ValidationError

from notifier.schemas.job import WelcomeJobPayload


def test_parses_scheduler_payload():
    payload = WelcomeJobPayload.model_validate({"userId": "1001", "username": "alice"})
    task = payload.to_task()
    assert task.user_id == "1001"
    assert task.username == "alice"
    assert task.title is None


def test_strips_whitespace():
    payload = WelcomeJobPayload.model_validate({"userId": " 1001 ", "username": " alice "})
    assert payload.user_id == "1001"
    assert payload.username == "alice"


def test_keeps_title():
    payload = WelcomeJobPayload.model_validate(
        {"userId": "1001", "username": "alice", "title": "Resend ..."},
    )
    assert payload.to_task().title == "Resend ..."


def test_rejects_missing_user_id():
    with pytest.raises(ValidationError):
        WelcomeJobPayload.model_validate({"username": "alice"})
