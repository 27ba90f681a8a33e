"""
Rocket.Chat service for Jira Notifier.
Implements the user directory and chat platform capabilities over the REST API.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import aiohttp

from ..config import settings
from ..core.capabilities import Attachment, ChatPlatform, ChatUser, Conversation, UserDirectory
from ..core.exceptions import (
    DeliveryError,
    DirectoryLookupError,
    RocketChatAPIError,
    RocketChatClientError,
)


logger = logging.getLogger(__name__)

USER_NOT_FOUND_ERRORS = {"error-invalid-user", "error-user-not-found"}


class AsyncRocketChatClient(UserDirectory, ChatPlatform):
    """
    Async client for the Rocket.Chat REST API.

    Authenticates as the bot account whose user id and personal access token are
    configured; that account is the application identity messages are sent as.
    Requests are not retried.
    """

    API_PATH = "/api/v1"
    PAGE_SIZE = 100

    def __init__(
        self,
        base_url: str,
        user_id: Optional[str],
        auth_token: Optional[str],
        timeout: float = 30,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the Rocket.Chat client.

        Args:
            base_url: Server URL, e.g. https://chat.example.com
            user_id: Bot account user id
            auth_token: Bot account personal access token
            timeout: Total request timeout in seconds
            logger: Optional logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id
        self.auth_token = auth_token
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        self.headers = {
            "X-User-Id": self.user_id or "",
            "X-Auth-Token": self.auth_token or "",
            "Content-Type": "application/json; charset=utf-8",
            "User-Agent": "JiraNotifier-RocketChatClient/1.0"
        }

    @property
    def has_credentials(self) -> bool:
        return bool(self.user_id and self.auth_token)

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Make a request to the Rocket.Chat API.

        Raises:
            RocketChatAPIError: If the API returns an error
            RocketChatClientError: For transport and decoding errors
        """
        url = f"{self.base_url}{self.API_PATH}/{endpoint}"
        self.logger.debug(f"Making {method} request to {url}")

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(
                    method=method,
                    url=url,
                    params=params,
                    json=data,
                    headers=self.headers
                ) as response:
                    status = response.status
                    result = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            self.logger.error(f"Request to {endpoint} failed: {e}")
            raise RocketChatClientError(f"Request failed: {e}", original_error=e) from e
        except asyncio.TimeoutError as e:
            self.logger.error(f"Request to {endpoint} timed out after {self.timeout}s")
            raise RocketChatClientError(f"Request timed out after {self.timeout}s", original_error=e) from e
        except json.JSONDecodeError as e:
            self.logger.error(f"Failed to decode JSON response: {e}")
            raise RocketChatClientError(f"Invalid JSON response: {e}", original_error=e) from e

        if not isinstance(result, dict):
            raise RocketChatClientError(f"Unexpected response from {endpoint}: {result!r}")

        if status >= 400 or not result.get("success", False):
            error = result.get("error") or result.get("message") or f"HTTP {status}"
            self.logger.debug(f"Rocket.Chat API error on {endpoint}: {error}")
            raise RocketChatAPIError(error, status_code=status, error_type=result.get("errorType"), response=result)

        self.logger.debug(f"Request successful: {endpoint}")
        return result

    @staticmethod
    def _to_user(data: Dict[str, Any]) -> ChatUser:
        return ChatUser(id=data.get("_id", ""), username=data.get("username", ""), name=data.get("name"))

    async def get_application_identity(self) -> Optional[ChatUser]:
        if not self.has_credentials:
            self.logger.warning("Rocket.Chat credentials are not configured")
            return None

        result = await self._make_request("GET", "me")
        if not result.get("username"):
            return None
        return self._to_user(result)

    async def find_user_by_username(self, username: str) -> Optional[ChatUser]:
        try:
            result = await self._make_request("GET", "users.info", params={"username": username})
        except RocketChatAPIError as e:
            if e.error_type in USER_NOT_FOUND_ERRORS or e.status_code == 404:
                return None
            raise DirectoryLookupError(str(e), username=username, original_error=e) from e
        except RocketChatClientError as e:
            raise DirectoryLookupError(str(e), username=username, original_error=e) from e

        user = result.get("user")
        if not isinstance(user, dict):
            return None
        return self._to_user(user)

    async def find_direct_conversation(self, usernames: Sequence[str]) -> Optional[Conversation]:
        wanted = set(usernames)
        offset = 0

        while True:
            result = await self._make_request(
                "GET", "im.list", params={"offset": offset, "count": self.PAGE_SIZE}
            )
            rooms: List[Dict[str, Any]] = result.get("ims") or []
            for room in rooms:
                room_usernames = room.get("usernames") or []
                if set(room_usernames) == wanted:
                    return Conversation(id=room["_id"], usernames=list(room_usernames))

            offset += len(rooms)
            total = result.get("total", 0)
            if not rooms or offset >= total:
                return None

    async def create_direct_conversation(self, creator: ChatUser, usernames: Sequence[str]) -> None:
        others = [username for username in usernames if username != creator.username]
        if not others:
            raise DeliveryError("Cannot create a direct conversation without other members")

        if len(others) == 1:
            data = {"username": others[0]}
        else:
            data = {"usernames": ",".join(others)}

        await self._make_request("POST", "im.create", data=data)
        self.logger.info(f"Created direct conversation between {creator.username} and {', '.join(others)}")

    async def send_message(
        self,
        conversation: Conversation,
        sender: ChatUser,
        attachments: List[Attachment]
    ) -> None:
        data = {
            "roomId": conversation.id,
            "text": "",
            "attachments": [attachment.to_dict() for attachment in attachments],
        }
        try:
            await self._make_request("POST", "chat.postMessage", data=data)
        except RocketChatClientError as e:
            raise DeliveryError(
                f"Could not post message as {sender.username}: {e}",
                conversation_id=conversation.id,
                original_error=e
            ) from e


def create_rocketchat_client() -> AsyncRocketChatClient:
    """Build a client from application settings."""
    return AsyncRocketChatClient(
        base_url=settings.rocketchat_url,
        user_id=settings.rocketchat_user_id,
        auth_token=settings.rocketchat_auth_token,
        timeout=settings.rocketchat_timeout,
    )
