"""
Tests for notifier exceptions and how their details reach the logs.
"""

import logging

import pytest

from jira_notifier.core.capabilities import ChatUser
from jira_notifier.core.delivery import DeliveryDriver
from jira_notifier.core.exceptions import (
    DeliveryError,
    DirectoryLookupError,
    RocketChatAPIError,
    describe_error,
)
from jira_notifier.core.identity_resolver import IdentityResolver
from jira_notifier.core.outcomes import FailureReason, ResolutionResult
from tests.conftest import FakeDirectory


class TestErrorDetails:
    """Test error classification details."""

    def test_directory_error_details(self):
        error = DirectoryLookupError("directory down", username="bob")

        assert error.to_dict() == {
            "message": "directory down",
            "category": "directory",
            "severity": "medium",
            "recoverable": True,
            "context": {"username": "bob"},
        }

    def test_unauthorized_api_error_is_not_recoverable(self):
        error = RocketChatAPIError("You must be logged in", status_code=401)

        assert error.to_dict()["recoverable"] is False
        assert error.to_dict()["category"] == "chat_api"

    def test_describe_error(self):
        error = DeliveryError("room archived", username="bob", conversation_id="r1")

        description = describe_error(error)
        assert description.startswith("room archived [category=delivery, severity=high, recoverable=True")
        assert "'conversation_id': 'r1'" in description

    def test_describe_plain_exception(self):
        assert describe_error(RuntimeError("boom")) == "RuntimeError: boom"


@pytest.mark.asyncio
async def test_lookup_failure_log_carries_error_category(caplog):
    error = DirectoryLookupError("directory down", username="dave")
    directory = FakeDirectory(errors={"dave": error})

    with caplog.at_level(logging.ERROR):
        output = await IdentityResolver(directory).resolve([{"name": "dave"}], "name", {})

    assert output.results[0].error is FailureReason.LOOKUP_ERROR
    assert "category=directory" in caplog.text
    assert "severity=medium" in caplog.text


@pytest.mark.asyncio
async def test_delivery_failure_log_carries_error_category(chat, app_user, caplog):
    async def send_fails(conversation, sender, attachments):
        raise DeliveryError("room archived", username="bob", conversation_id=conversation.id)

    chat.send_message = send_fails
    result = ResolutionResult(
        participant={"name": "bob"},
        username="bob",
        user=ChatUser(id="id-bob", username="bob")
    )

    with caplog.at_level(logging.ERROR):
        outcomes = await DeliveryDriver(chat).deliver([result], app_user, lambda p: ["x"], lambda p: False)

    assert outcomes[0].error is FailureReason.DELIVERY_FAILED
    assert outcomes[0].detail == "room archived"
    assert "category=delivery" in caplog.text
    assert "recoverable=True" in caplog.text
