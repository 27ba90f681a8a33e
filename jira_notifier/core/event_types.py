"""
Jira webhook event classification.

Maps the webhook discriminators onto the kind of notification that gets
rendered. Jira Server and Jira Cloud report the same comment events under
different names, so both spellings are listed in the transition table.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


logger = logging.getLogger(__name__)


class WebhookEvent(str, Enum):
    """Values of the top-level webhookEvent discriminator."""
    ISSUE_CREATED = "jira:issue_created"
    ISSUE_DELETED = "jira:issue_deleted"
    ISSUE_UPDATED = "jira:issue_updated"
    ISSUE_COMMENTED = "issue_commented"
    COMMENT_CREATED = "comment_created"
    COMMENT_UPDATED = "comment_updated"
    COMMENT_DELETED = "comment_deleted"


class IssueEventTypeName(str, Enum):
    """Values of issue_event_type_name that refine jira:issue_updated."""
    ISSUE_COMMENTED = "issue_commented"
    ISSUE_COMMENT_EDITED = "issue_comment_edited"
    ISSUE_COMMENT_DELETED = "issue_comment_deleted"


class NotificationKind(Enum):
    """What a recipient is told about."""
    ISSUE_CREATED = "issue_created"
    ISSUE_DELETED = "issue_deleted"
    ISSUE_CHANGED = "issue_changed"
    COMMENT_ADDED = "comment_added"
    COMMENT_CREATED = "comment_created"
    COMMENT_UPDATED = "comment_updated"
    COMMENT_DELETED = "comment_deleted"
    UNHANDLED = "unhandled"


TRANSITIONS: Dict[Tuple[WebhookEvent, Optional[IssueEventTypeName]], NotificationKind] = {
    (WebhookEvent.ISSUE_CREATED, None): NotificationKind.ISSUE_CREATED,
    (WebhookEvent.ISSUE_DELETED, None): NotificationKind.ISSUE_DELETED,
    (WebhookEvent.ISSUE_UPDATED, IssueEventTypeName.ISSUE_COMMENTED): NotificationKind.COMMENT_ADDED,
    (WebhookEvent.ISSUE_UPDATED, IssueEventTypeName.ISSUE_COMMENT_EDITED): NotificationKind.COMMENT_UPDATED,
    (WebhookEvent.ISSUE_UPDATED, IssueEventTypeName.ISSUE_COMMENT_DELETED): NotificationKind.COMMENT_DELETED,
    (WebhookEvent.ISSUE_UPDATED, None): NotificationKind.ISSUE_CHANGED,
    (WebhookEvent.ISSUE_COMMENTED, None): NotificationKind.COMMENT_CREATED,
    (WebhookEvent.COMMENT_CREATED, None): NotificationKind.COMMENT_CREATED,
    (WebhookEvent.COMMENT_UPDATED, None): NotificationKind.COMMENT_UPDATED,
    (WebhookEvent.COMMENT_DELETED, None): NotificationKind.COMMENT_DELETED,
}

COMMENT_KINDS: FrozenSet[NotificationKind] = frozenset({
    NotificationKind.COMMENT_ADDED,
    NotificationKind.COMMENT_CREATED,
    NotificationKind.COMMENT_UPDATED,
    NotificationKind.COMMENT_DELETED,
})


def _to_enum(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        return None


def classify_event(event_type: Optional[str],
                   issue_event_type_name: Optional[str] = None) -> NotificationKind:
    """
    Classify a webhook event into a notification kind.

    Args:
        event_type: webhookEvent (or issue_event_type_name when webhookEvent is absent)
        issue_event_type_name: Secondary discriminator, only consulted for jira:issue_updated

    Returns:
        The notification kind, NotificationKind.UNHANDLED for anything not in TRANSITIONS
    """
    event = _to_enum(WebhookEvent, event_type)
    if event is None:
        logger.debug(f"Unrecognized webhook event: {event_type}")
        return NotificationKind.UNHANDLED

    secondary = None
    if event is WebhookEvent.ISSUE_UPDATED:
        secondary = _to_enum(IssueEventTypeName, issue_event_type_name)

    return TRANSITIONS.get((event, secondary), NotificationKind.UNHANDLED)
