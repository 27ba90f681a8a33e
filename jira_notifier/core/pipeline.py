"""
Jira webhook to direct-message pipeline.

Runs the stages for one event in sequence:
parse -> extract participants -> resolve identities -> filter/format/deliver -> respond.
Every capability call is awaited one at a time and no state survives between events.
"""

import logging
from typing import Any, Dict, Optional

from .capabilities import ChatPlatform, SettingsReader, UserDirectory
from .delivery import DeliveryDriver, app_identity_unavailable
from .event_types import NotificationKind, classify_event
from .identity_resolver import IdentityResolver, destination_username
from .message_formatter import MessageFormatter
from .notification_filter import should_suppress_internal_comment
from .notifier_config import NotifierConfig, load_notifier_config
from .outcomes import ResolutionResult
from .participant_extractor import extract_participants
from .payload_parser import parse_payload
from .response_builder import build_response
from ..models.core import WebhookResponse


logger = logging.getLogger(__name__)


class JiraNotificationPipeline:
    """Turns one Jira webhook payload into direct messages."""

    def __init__(self,
                 directory: UserDirectory,
                 chat: ChatPlatform,
                 default_icon: Optional[str] = None,
                 include_deliveries: bool = False):
        """
        Initialize the pipeline.

        Args:
            directory: Chat user directory used to resolve participants
            chat: Chat platform used to find the app account and send messages
            default_icon: Image URL used when a payload has no avatar or issue-type icon
            include_deliveries: Report per-recipient outcomes in the response
        """
        self.resolver = IdentityResolver(directory)
        self.driver = DeliveryDriver(chat)
        self.chat = chat
        self.formatter = MessageFormatter(default_icon)
        self.include_deliveries = include_deliveries
        self.logger = logging.getLogger(__name__)

    async def process(self, payload: Dict[str, Any], config: NotifierConfig) -> WebhookResponse:
        """
        Process a webhook payload with already-resolved configuration.

        Never raises for per-recipient problems; they are reported in the response.
        """
        parsed = parse_payload(payload)
        warnings = list(config.warnings)

        participants = extract_participants(parsed.fields, parsed.raw, config.custom_user_fields)
        kind = classify_event(parsed.event_type, parsed.issue_event_type_name)

        self.logger.info(
            f"📋 Jira event {parsed.event_type} ({kind.value}) for {parsed.issue_key}: "
            f"{len(participants)} participants"
        )

        try:
            app_user = await self.chat.get_application_identity()
        except Exception as e:
            self.logger.error(f"Could not read application identity: {e}")
            warnings.append(f"Could not read application identity: {e}")
            app_user = None

        if app_user is None:
            self.logger.warning("App user is undefined, aborting DM send")
            warnings.append("Application identity unavailable; no direct messages sent")
            results = [
                ResolutionResult(
                    participant=participant,
                    username=destination_username(participant, config.mapping_field, config.user_mapping)
                )
                for participant in participants
            ]
            outcomes = app_identity_unavailable(results)
            return build_response(parsed, participants, outcomes, warnings, self.include_deliveries)

        mapping = await self.resolver.resolve(participants, config.mapping_field, config.user_mapping)
        warnings.extend(mapping.warnings)

        if kind is NotificationKind.UNHANDLED and participants:
            warnings.append(f"No handler for event {parsed.event_type}")

        def render(participant):
            return self.formatter.build_attachments(parsed, kind, participant)

        def suppress(participant):
            return should_suppress_internal_comment(kind, parsed.comment, config.skip_internal_comments)

        outcomes = await self.driver.deliver(mapping.results, app_user, render, suppress)

        sent = sum(1 for outcome in outcomes if outcome.sent)
        self.logger.info(f"✅ Sent {sent}/{len(outcomes)} DMs for {parsed.issue_key}")
        for outcome in outcomes:
            if not outcome.sent:
                self.logger.info(f"DM to {outcome.username} not sent: {outcome.error.value if outcome.error else 'unknown'}")

        return build_response(parsed, participants, outcomes, warnings, self.include_deliveries)


async def process_jira_webhook(payload: Dict[str, Any],
                               settings_reader: SettingsReader,
                               directory: UserDirectory,
                               chat: ChatPlatform,
                               default_icon: Optional[str] = None,
                               include_deliveries: bool = False) -> WebhookResponse:
    """Load the notifier settings once, then run the pipeline for a payload."""
    config = await load_notifier_config(settings_reader)
    pipeline = JiraNotificationPipeline(directory, chat, default_icon, include_deliveries)
    return await pipeline.process(payload, config)
