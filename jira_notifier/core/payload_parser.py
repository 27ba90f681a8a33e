"""Normalization of raw Jira webhook payloads."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ParsedPayload:
    """Canonical view of one webhook event."""
    issue: Dict[str, Any]
    fields: Dict[str, Any]
    issue_key: Optional[str]
    issue_summary: Optional[str]
    event_type: Optional[str]
    issue_event_type_name: Optional[str] = None
    comment: Optional[Dict[str, Any]] = None
    changelog_items: List[Dict[str, Any]] = field(default_factory=list)
    actor: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def parse_payload(payload: Dict[str, Any]) -> ParsedPayload:
    """
    Parse an incoming Jira webhook payload.

    Never raises: missing or oddly shaped parts come back as empty dicts,
    empty lists or None.
    """
    payload = _as_dict(payload)
    issue = _as_dict(payload.get("issue"))
    fields = _as_dict(issue.get("fields"))

    event_type = payload.get("webhookEvent")
    if event_type is None:
        event_type = payload.get("issue_event_type_name")

    changelog = _as_dict(payload.get("changelog"))
    items = changelog.get("items")
    changelog_items = [item for item in items if isinstance(item, dict)] if isinstance(items, list) else []

    comment = payload.get("comment")
    actor = payload.get("user")

    return ParsedPayload(
        issue=issue,
        fields=fields,
        issue_key=_as_str(issue.get("key")),
        issue_summary=_as_str(fields.get("summary")),
        event_type=_as_str(event_type),
        issue_event_type_name=_as_str(payload.get("issue_event_type_name")),
        comment=comment if isinstance(comment, dict) else None,
        changelog_items=changelog_items,
        actor=actor if isinstance(actor, dict) else None,
        raw=payload,
    )
