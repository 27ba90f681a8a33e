"""Per-participant and per-recipient results of the notification pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .capabilities import ChatUser


class FailureReason(str, Enum):
    """Tags recorded for participants that did not get a message."""
    NO_IDENTIFIER = "no-identifier"
    NOT_FOUND = "not-found"
    LOOKUP_ERROR = "lookup-error"
    UNHANDLED_EVENT = "unhandled-event"
    INTERNAL_COMMENT_SUPPRESSED = "internal-comment-suppressed"
    APP_IDENTITY_UNAVAILABLE = "app-identity-unavailable"
    DELIVERY_FAILED = "delivery-failed"


@dataclass
class ResolutionResult:
    """Outcome of mapping one participant to a chat account."""
    participant: Dict[str, Any]
    username: Optional[str] = None
    user: Optional[ChatUser] = None
    error: Optional[FailureReason] = None
    detail: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.user is not None and self.error is None


@dataclass
class MappingOutput:
    """All resolution results for an event plus the warnings raised on the way."""
    results: List[ResolutionResult] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class DeliveryOutcome:
    """Outcome of notifying one recipient."""
    username: Optional[str]
    sent: bool
    error: Optional[FailureReason] = None
    detail: Optional[str] = None
    user_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "sent": self.sent,
            "error": self.error.value if self.error else None,
            "detail": self.detail,
            "userId": self.user_id,
        }
