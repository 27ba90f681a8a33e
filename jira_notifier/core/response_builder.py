"""Aggregation of pipeline results into the webhook response."""

from typing import Any, Dict, List

from ..models.core import ParsedEventSummary, WebhookResponse
from .outcomes import DeliveryOutcome
from .payload_parser import ParsedPayload

SUCCESS_MESSAGE = "Jira webhook received, parsed, and DMs attempted"


def build_response(parsed: ParsedPayload,
                   participants: List[Dict[str, Any]],
                   outcomes: List[DeliveryOutcome],
                   warnings: List[str],
                   include_deliveries: bool = False) -> WebhookResponse:
    """Summarize one processed event. Delivery failures are reported as data."""
    summary = ParsedEventSummary(
        issue_key=parsed.issue_key,
        event_type=parsed.event_type,
        participant_count=len(participants),
        total_dms=len(outcomes),
        sent=sum(1 for outcome in outcomes if outcome.sent),
    )

    return WebhookResponse(
        success=True,
        message=SUCCESS_MESSAGE,
        parsed=summary,
        warnings=list(warnings),
        deliveries=[outcome.to_dict() for outcome in outcomes] if include_deliveries else None,
    )
