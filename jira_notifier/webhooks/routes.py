"""
Jira webhook endpoint.

Jira posts issue and comment events here; each one is turned into direct
messages for the issue's participants. The endpoint always answers 200 so
Jira does not retry; delivery problems are reported in the response body.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import settings
from ..core.capabilities import ChatPlatform, SettingsReader, UserDirectory
from ..core.pipeline import process_jira_webhook
from ..models.core import WebhookResponse
from ..services.rocketchat import AsyncRocketChatClient, create_rocketchat_client
from ..services.settings_reader import EnvironmentSettingsReader


logger = logging.getLogger(__name__)

webhook_router = APIRouter(tags=["jira-webhooks"])

_rocketchat_client: Optional[AsyncRocketChatClient] = None
_settings_reader: Optional[EnvironmentSettingsReader] = None


def get_rocketchat_client() -> AsyncRocketChatClient:
    """Get or create the Rocket.Chat client instance."""
    global _rocketchat_client
    if _rocketchat_client is None:
        _rocketchat_client = create_rocketchat_client()
    return _rocketchat_client


def get_settings_reader() -> SettingsReader:
    """Get or create the settings reader instance."""
    global _settings_reader
    if _settings_reader is None:
        _settings_reader = EnvironmentSettingsReader()
    return _settings_reader


def get_user_directory(client: AsyncRocketChatClient = Depends(get_rocketchat_client)) -> UserDirectory:
    return client


def get_chat_platform(client: AsyncRocketChatClient = Depends(get_rocketchat_client)) -> ChatPlatform:
    return client


def _rejected(message: str) -> JSONResponse:
    body = WebhookResponse(success=False, message=message)
    return JSONResponse(content=body.to_payload(), status_code=200)


@webhook_router.post(settings.webhook_path)
async def handle_jira_webhook(
    request: Request,
    settings_reader: SettingsReader = Depends(get_settings_reader),
    directory: UserDirectory = Depends(get_user_directory),
    chat: ChatPlatform = Depends(get_chat_platform),
) -> JSONResponse:
    """Receive a Jira webhook event and send direct messages to its participants."""
    start_time = datetime.now(timezone.utc)

    raw_payload = await request.body()
    if not raw_payload.strip():
        logger.warning("No payload received")
        return _rejected("No payload received")

    try:
        payload = json.loads(raw_payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"❌ Invalid JSON in Jira webhook: {e}")
        return _rejected("No payload received")

    if not isinstance(payload, dict):
        logger.warning("Jira webhook payload is not a JSON object")
        return _rejected("No payload received")

    logger.info(f"🚀 Received Jira webhook: {payload.get('webhookEvent', 'unknown')}")
    logger.debug(f"Jira webhook payload: {raw_payload[:2000]!r}")

    try:
        response = await process_jira_webhook(
            payload,
            settings_reader,
            directory,
            chat,
            default_icon=settings.default_icon_url,
            include_deliveries=settings.debug,
        )
    except Exception as e:
        processing_time = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
        logger.error(
            f"❌ Jira webhook processing failed: {e} (processed in {processing_time:.2f}ms)",
            exc_info=True
        )
        # 200 keeps Jira from retrying
        return _rejected(f"Webhook processing failed: {e}")

    processing_time = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
    logger.info(f"✅ Jira webhook processed in {processing_time:.2f}ms")
    return JSONResponse(content=response.to_payload(), status_code=200)
