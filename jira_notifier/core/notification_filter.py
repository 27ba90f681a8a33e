"""Delivery policy checks applied per recipient."""

from typing import Any, Dict, Optional

from .event_types import COMMENT_KINDS, NotificationKind


def is_internal_comment(comment: Optional[Dict[str, Any]]) -> bool:
    """True only when the payload explicitly marks the comment as not public (Jira Cloud)."""
    return isinstance(comment, dict) and comment.get("public") is False


def should_suppress_internal_comment(kind: NotificationKind,
                                     comment: Optional[Dict[str, Any]],
                                     skip_internal_comments: bool) -> bool:
    """
    Decide whether an internal comment must be withheld from a recipient.

    Args:
        kind: Classified notification kind
        comment: Comment object from the payload, if any
        skip_internal_comments: Value of the skip_internal_comments setting

    Returns:
        True when the notification must not be delivered
    """
    if not skip_internal_comments or kind not in COMMENT_KINDS:
        return False
    return is_internal_comment(comment)
