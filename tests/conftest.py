"""Shared fixtures and in-memory capability fakes for the notifier tests."""

from typing import Any, Dict, List, Optional, Sequence

import pytest

from jira_notifier.core.capabilities import (
    Attachment,
    ChatPlatform,
    ChatUser,
    Conversation,
    SettingsReader,
    UserDirectory,
)


class FakeSettingsReader(SettingsReader):
    """Settings held in a dict; keys listed in `errors` raise on read."""

    def __init__(self, values: Optional[Dict[str, Any]] = None, errors: Optional[Dict[str, Exception]] = None):
        self.values = values or {}
        self.errors = errors or {}
        self.reads: List[str] = []

    async def get_value(self, key: str) -> Any:
        self.reads.append(key)
        if key in self.errors:
            raise self.errors[key]
        return self.values.get(key)


class FakeDirectory(UserDirectory):
    """User directory with a fixed set of accounts."""

    def __init__(self, usernames: Sequence[str] = (), errors: Optional[Dict[str, Exception]] = None):
        self.users = {name: ChatUser(id=f"id-{name}", username=name) for name in usernames}
        self.errors = errors or {}
        self.lookups: List[str] = []

    async def find_user_by_username(self, username: str) -> Optional[ChatUser]:
        self.lookups.append(username)
        if username in self.errors:
            raise self.errors[username]
        return self.users.get(username)


class FakeChatPlatform(ChatPlatform):
    """Chat platform that records conversations and messages in memory."""

    def __init__(self, app_user: Optional[ChatUser] = None, failing_usernames: Sequence[str] = ()):
        self.app_user = app_user
        self.failing_usernames = set(failing_usernames)
        self.conversations: Dict[frozenset, Conversation] = {}
        self.created: List[List[str]] = []
        self.sent: List[Dict[str, Any]] = []
        self.lookups = 0

    def add_conversation(self, *usernames: str) -> Conversation:
        conversation = Conversation(id=f"room-{len(self.conversations) + 1}", usernames=list(usernames))
        self.conversations[frozenset(usernames)] = conversation
        return conversation

    async def get_application_identity(self) -> Optional[ChatUser]:
        return self.app_user

    async def find_direct_conversation(self, usernames: Sequence[str]) -> Optional[Conversation]:
        self.lookups += 1
        return self.conversations.get(frozenset(usernames))

    async def create_direct_conversation(self, creator: ChatUser, usernames: Sequence[str]) -> None:
        self.created.append(list(usernames))
        self.add_conversation(*usernames)

    async def send_message(self, conversation: Conversation, sender: ChatUser,
                           attachments: List[Attachment]) -> None:
        if self.failing_usernames.intersection(conversation.usernames):
            raise RuntimeError("room is read-only")
        self.sent.append({
            "conversation": conversation,
            "sender": sender,
            "attachments": attachments,
        })

    @property
    def call_count(self) -> int:
        return self.lookups + len(self.created) + len(self.sent)


@pytest.fixture
def app_user():
    return ChatUser(id="bot-id", username="jira.bot", name="Jira Bot")


@pytest.fixture
def chat(app_user):
    return FakeChatPlatform(app_user=app_user)


@pytest.fixture
def sample_issue():
    """A Jira Server style issue with the usual participants."""
    return {
        "self": "https://jira.example.com/rest/api/2/issue/10001",
        "key": "PRJ-1",
        "fields": {
            "summary": "Login page broken",
            "description": "Users cannot log in after the last deploy.",
            "created": "2024-01-01T10:00:00.000+0000",
            "priority": {"name": "2. High"},
            "issuetype": {"name": "Bug", "iconUrl": "https://jira.example.com/images/bug.png"},
            "project": {"key": "PRJ", "projectTypeKey": "software"},
            "assignee": {
                "name": "bob",
                "displayName": "Bob Builder",
                "avatarUrls": {"24x24": "https://jira.example.com/avatar/bob-24.png"},
            },
            "reporter": {"name": "alice", "displayName": "Alice Doe"},
            "creator": {"name": "alice", "displayName": "Alice Doe"},
            "watches": {"watchers": [{"name": "carol", "displayName": "Carol King"}]},
        },
    }


@pytest.fixture
def created_payload(sample_issue):
    return {
        "webhookEvent": "jira:issue_created",
        "issue": sample_issue,
        "user": {"name": "alice", "displayName": "Alice Doe"},
    }


@pytest.fixture
def comment_payload(sample_issue):
    return {
        "webhookEvent": "comment_created",
        "issue": sample_issue,
        "user": {"name": "alice", "displayName": "Alice Doe"},
        "comment": {
            "body": "Looking into it",
            "public": False,
            "author": {"name": "alice", "displayName": "Alice Doe"},
        },
    }
