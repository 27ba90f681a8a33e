"""Pydantic models for the webhook HTTP response."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParsedEventSummary(BaseModel):
    """Counts reported back to the webhook caller."""

    model_config = ConfigDict(populate_by_name=True)

    issue_key: Optional[str] = Field(None, alias="issueKey", description="Key of the issue the event is about")
    event_type: Optional[str] = Field(None, alias="eventType", description="Webhook event discriminator")
    participant_count: int = Field(0, alias="participantCount", description="Unique participants extracted")
    total_dms: int = Field(0, alias="totalDMs", description="Delivery outcomes recorded")
    sent: int = Field(0, description="Direct messages actually sent")


class WebhookResponse(BaseModel):
    """Body returned for every webhook call."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Whether the payload was accepted")
    message: str = Field(..., description="Human readable status")
    parsed: Optional[ParsedEventSummary] = Field(None, description="Summary of the processed event")
    warnings: List[str] = Field(default_factory=list, description="Recovered configuration and lookup problems")
    deliveries: Optional[List[Dict[str, Any]]] = Field(None, description="Per-recipient outcomes (debug only)")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, leaving out unset debug data."""
        return self.model_dump(by_alias=True, exclude_none=True)
