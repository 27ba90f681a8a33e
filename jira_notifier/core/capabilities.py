"""
Capabilities the pipeline consumes from its host.

The pipeline only talks to settings storage, the user directory and the chat
platform through these interfaces, so it can run against any implementation
(the Rocket.Chat REST client in production, in-memory fakes in tests).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass
class ChatUser:
    """An account on the destination chat platform."""
    id: str
    username: str
    name: Optional[str] = None


@dataclass
class Conversation:
    """A direct-message room on the destination chat platform."""
    id: str
    usernames: List[str] = field(default_factory=list)


@dataclass
class Attachment:
    """A rich message attachment rendered for one notification."""
    text: str
    author_name: str = ""
    author_icon: str = ""
    thumb_url: str = ""
    ts: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the Rocket.Chat attachment field names."""
        data = {
            "text": self.text,
            "author_name": self.author_name,
            "author_icon": self.author_icon,
            "thumb_url": self.thumb_url,
        }
        if self.ts:
            data["ts"] = self.ts
        return data


class SettingsReader(ABC):
    """Read-only access to notifier settings."""

    @abstractmethod
    async def get_value(self, key: str) -> Any:
        """
        Return the stored value for a setting.

        Args:
            key: Setting identifier

        Returns:
            The value, or None when the setting is absent
        """
        pass


class UserDirectory(ABC):
    """Lookup of destination-platform accounts."""

    @abstractmethod
    async def find_user_by_username(self, username: str) -> Optional[ChatUser]:
        """
        Find an account by username.

        Returns:
            The account, or None when no such user exists

        Raises:
            Exception: If the directory cannot be queried
        """
        pass


class ChatPlatform(ABC):
    """Direct-message primitives of the destination chat platform."""

    @abstractmethod
    async def get_application_identity(self) -> Optional[ChatUser]:
        """Return the account messages are sent as, or None if unavailable."""
        pass

    @abstractmethod
    async def find_direct_conversation(self, usernames: Sequence[str]) -> Optional[Conversation]:
        """Return the direct conversation between exactly these users, if any."""
        pass

    @abstractmethod
    async def create_direct_conversation(self, creator: ChatUser, usernames: Sequence[str]) -> None:
        """Create a direct conversation between the given users."""
        pass

    @abstractmethod
    async def send_message(
        self,
        conversation: Conversation,
        sender: ChatUser,
        attachments: List[Attachment]
    ) -> None:
        """Post a message with attachments into a conversation."""
        pass
