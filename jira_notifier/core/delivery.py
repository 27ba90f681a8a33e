"""Direct-message delivery to resolved recipients."""

import logging
from typing import Any, Callable, Dict, List

from .capabilities import Attachment, ChatPlatform, ChatUser, Conversation
from .exceptions import DeliveryError, describe_error
from .outcomes import DeliveryOutcome, FailureReason, ResolutionResult


logger = logging.getLogger(__name__)

Renderer = Callable[[Dict[str, Any]], List[Attachment]]
SuppressionCheck = Callable[[Dict[str, Any]], bool]


def app_identity_unavailable(results: List[ResolutionResult]) -> List[DeliveryOutcome]:
    """Fail every recipient because there is no account to send as."""
    return [
        DeliveryOutcome(
            username=result.username,
            sent=False,
            error=FailureReason.APP_IDENTITY_UNAVAILABLE
        )
        for result in results
    ]


class DeliveryDriver:
    """Sends one direct message per recipient, one recipient at a time."""

    def __init__(self, chat: ChatPlatform):
        self.chat = chat
        self.logger = logging.getLogger(__name__)

    async def ensure_conversation(self, app_user: ChatUser, recipient: ChatUser) -> Conversation:
        """Find the direct conversation with a recipient, creating it if missing."""
        usernames = [recipient.username, app_user.username]

        conversation = await self.chat.find_direct_conversation(usernames)
        if conversation is None:
            self.logger.debug(f"Creating direct conversation with {recipient.username}")
            await self.chat.create_direct_conversation(app_user, usernames)
            conversation = await self.chat.find_direct_conversation(usernames)

        if conversation is None:
            raise DeliveryError(
                f"Direct conversation with {recipient.username} unavailable after creation",
                username=recipient.username
            )
        return conversation

    async def deliver(self,
                      results: List[ResolutionResult],
                      app_user: ChatUser,
                      render: Renderer,
                      suppress: SuppressionCheck) -> List[DeliveryOutcome]:
        """
        Deliver notifications for all resolution results.

        Args:
            results: Resolution results in participant order
            app_user: Account the messages are sent as
            render: Builds the attachments for a recipient's participant reference
            suppress: Returns True when a recipient must not be notified

        Returns:
            One outcome per resolution result, in the same order
        """
        outcomes: List[DeliveryOutcome] = []

        for result in results:
            username = result.username

            if not result.resolved:
                outcomes.append(DeliveryOutcome(
                    username=username,
                    sent=False,
                    error=result.error,
                    detail=result.detail
                ))
                continue

            if suppress(result.participant):
                self.logger.info(f"Internal comment, DM to {username} not sent")
                outcomes.append(DeliveryOutcome(
                    username=username,
                    sent=False,
                    error=FailureReason.INTERNAL_COMMENT_SUPPRESSED
                ))
                continue

            try:
                attachments = render(result.participant)
                if not attachments:
                    outcomes.append(DeliveryOutcome(
                        username=username,
                        sent=False,
                        error=FailureReason.UNHANDLED_EVENT
                    ))
                    continue

                conversation = await self.ensure_conversation(app_user, result.user)
                await self.chat.send_message(conversation, app_user, attachments)
            except Exception as e:
                self.logger.error(f"Failed to send DM to {username}: {describe_error(e)}")
                outcomes.append(DeliveryOutcome(
                    username=username,
                    sent=False,
                    error=FailureReason.DELIVERY_FAILED,
                    detail=str(e)
                ))
                continue

            outcomes.append(DeliveryOutcome(username=username, sent=True, user_id=result.user.id))

        return outcomes
