"""Rocket.Chat attachment formatting for Jira notifications."""

import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from .assets import DEFAULT_JIRA_ICON
from .capabilities import Attachment
from .event_types import NotificationKind
from .participant_extractor import identity_key
from .payload_parser import ParsedPayload


logger = logging.getLogger(__name__)

DESC_MAX_LENGTH = 140
SERVICE_DESK_PROJECT_TYPE = "service_desk"

_REST_SUFFIX = re.compile(r"/rest/.*$")
_PRIORITY_ORDINAL = re.compile(r"^\s*\d*\.\s*")
_TZ_WITHOUT_COLON = re.compile(r"([+-]\d{2})(\d{2})$")

COMMENT_HEADINGS = {
    NotificationKind.COMMENT_ADDED: "Comment on",
    NotificationKind.COMMENT_CREATED: "Comment created for",
    NotificationKind.COMMENT_UPDATED: "Comment updated for",
    NotificationKind.COMMENT_DELETED: "Comment deleted for",
}


def strip_description(text: Any) -> str:
    """Truncate text to DESC_MAX_LENGTH characters, ending with an ellipsis when cut."""
    if not text or not isinstance(text, str):
        return ""
    if len(text) > DESC_MAX_LENGTH:
        return text[:DESC_MAX_LENGTH - 3] + "..."
    return text


def get_avatar_url(user: Optional[Dict[str, Any]]) -> Optional[str]:
    """Find a 24x24 avatar URL in any of the shapes Jira uses."""
    if not isinstance(user, dict):
        return None

    avatar_urls = user.get("avatarUrls")
    if isinstance(avatar_urls, dict) and avatar_urls.get("24x24"):
        return avatar_urls["24x24"]

    links = user.get("_links")
    if isinstance(links, dict):
        link_avatars = links.get("avatarUrls")
        if isinstance(link_avatars, dict) and link_avatars.get("24x24"):
            return link_avatars["24x24"]
        # Some payloads carry a single URL string here
        if isinstance(link_avatars, str) and link_avatars:
            return link_avatars

    return None


def parse_jira_timestamp(value: Any) -> Optional[str]:
    """Convert a Jira timestamp (2024-01-01T10:00:00.000+0000) to ISO 8601."""
    if not value or not isinstance(value, str):
        return None
    normalized = value.strip()
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    normalized = _TZ_WITHOUT_COLON.sub(r"\1:\2", normalized)
    try:
        return datetime.fromisoformat(normalized).isoformat()
    except ValueError:
        logger.debug(f"Unparsable Jira timestamp: {value}")
        return None


class MessageFormatter:
    """Builds the attachments sent to each recipient."""

    def __init__(self, default_icon: Optional[str] = None):
        self.default_icon = default_icon or DEFAULT_JIRA_ICON
        self.logger = logging.getLogger(__name__)

    def base_url(self, parsed: ParsedPayload) -> Optional[str]:
        """Jira base URL derived from the issue's REST self link."""
        self_url = parsed.issue.get("self")
        if not self_url or not isinstance(self_url, str):
            return None
        return _REST_SUFFIX.sub("", self_url)

    def _service_desk_id(self, fields: Dict[str, Any]) -> Optional[str]:
        for value in fields.values():
            if not isinstance(value, dict):
                continue
            request_type = value.get("requestType")
            if isinstance(request_type, dict) and request_type.get("serviceDeskId"):
                return str(request_type["serviceDeskId"])
        return None

    def build_ticket_url(self, parsed: ParsedPayload) -> Optional[str]:
        """
        Compute the link recipients should open.

        Service desk issues link to the customer portal when the payload carries
        a request type; everything else links to the issue browse page.
        """
        base = self.base_url(parsed)
        if base is None or not parsed.issue_key:
            return None

        project = parsed.fields.get("project")
        if isinstance(project, dict) and project.get("projectTypeKey") == SERVICE_DESK_PROJECT_TYPE:
            service_desk_id = self._service_desk_id(parsed.fields)
            if service_desk_id:
                return f"{base}/servicedesk/customer/portal/{service_desk_id}/{parsed.issue_key}"

        return f"{base}/browse/{parsed.issue_key}"

    def _priority(self, fields: Dict[str, Any]) -> str:
        priority = fields.get("priority")
        if not isinstance(priority, dict) or not isinstance(priority.get("name"), str):
            return ""
        return _PRIORITY_ORDINAL.sub("", priority["name"])

    def _assigned_to(self, parsed: ParsedPayload) -> str:
        assignee = parsed.fields.get("assignee")
        if not isinstance(assignee, dict):
            return ""
        assignee_key = identity_key(assignee)
        if assignee_key and assignee_key != identity_key(parsed.actor):
            return f"assigned to {assignee.get('displayName') or assignee_key}"
        return ""

    def build_summary_link(self, parsed: ParsedPayload) -> str:
        """Rich summary line: linked key, summary, priority and assignee."""
        key = parsed.issue_key or ""
        url = self.build_ticket_url(parsed)
        key_text = f"*[{key}]({url})*" if url else f"*{key}*"
        summary = parsed.issue_summary or ""
        details = ", ".join(part for part in (self._priority(parsed.fields), self._assigned_to(parsed)) if part)
        if not details:
            return f"{key_text} {summary}"
        return f"{key_text} {summary} _({details})_"

    def prepare_attachment(self,
                           parsed: ParsedPayload,
                           user: Optional[Dict[str, Any]],
                           text: str) -> Attachment:
        """Wrap text in an attachment with author, thumbnail and timestamp."""
        author = user if isinstance(user, dict) else {}
        issue_type = parsed.fields.get("issuetype")
        thumb_url = issue_type.get("iconUrl") if isinstance(issue_type, dict) else None

        return Attachment(
            text=text,
            author_name=author.get("displayName") or "",
            author_icon=get_avatar_url(author) or self.default_icon,
            thumb_url=thumb_url or self.default_icon,
            ts=parse_jira_timestamp(parsed.fields.get("created")),
        )

    def _changelog_lines(self, items: List[Dict[str, Any]]) -> List[str]:
        lines = []
        for change in items:
            field_name = change.get("field")
            if field_name == "description":
                lines.append(f"Changed *description*:\n```\n{strip_description(change.get('toString'))}\n```")
            else:
                from_value = change.get("fromString") or "_none_"
                to_value = change.get("toString") or "_none_"
                label = f"*{field_name}*" if field_name else "_none_"
                lines.append(f"{label} changed from {from_value} to *{to_value}*")
        return lines

    def build_attachments(self,
                          parsed: ParsedPayload,
                          kind: NotificationKind,
                          participant: Dict[str, Any]) -> List[Attachment]:
        """
        Render the attachments for one recipient.

        Args:
            parsed: Parsed webhook payload
            kind: Classified notification kind
            participant: The recipient's Jira user reference

        Returns:
            Attachments to send; empty when the event has nothing to report
        """
        summary_link = self.build_summary_link(parsed)

        if kind is NotificationKind.ISSUE_CREATED:
            description = strip_description(parsed.fields.get("description"))
            return [self.prepare_attachment(parsed, participant, f"*Created* {summary_link}:\n{description}")]

        if kind is NotificationKind.ISSUE_DELETED:
            return [self.prepare_attachment(parsed, participant, f"*Deleted* {summary_link}")]

        if kind in COMMENT_HEADINGS:
            comment = parsed.comment or {}
            body = strip_description(comment.get("body"))
            text = f"{COMMENT_HEADINGS[kind]} {summary_link}:\n```\n{body}\n```"
            return [self.prepare_attachment(parsed, comment.get("author"), text)]

        if kind is NotificationKind.ISSUE_CHANGED:
            lines = self._changelog_lines(parsed.changelog_items)
            if not lines:
                return []
            changes = "\n  - ".join(lines)
            return [self.prepare_attachment(parsed, participant, f"*Updated* {summary_link}:\n  - {changes}")]

        return []
