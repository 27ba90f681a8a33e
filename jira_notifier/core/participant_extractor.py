"""
Participant extraction for Jira webhook payloads.

Collects every user an issue refers to (assignee, reporter, creator, watchers,
approvers, the acting user and admin-configured custom user fields) and
deduplicates them by identity key.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


logger = logging.getLogger(__name__)

IDENTITY_KEY_FIELDS = ("accountId", "emailAddress", "name")


class FieldShape(Enum):
    """Recognized shapes of a custom user field value."""
    APPROVAL_LIST = "approval_list"
    USER_LIST = "user_list"
    APPROVAL = "approval"
    USER = "user"
    UNRECOGNIZED = "unrecognized"


def identity_key(participant: Any) -> Optional[str]:
    """
    Derive the deduplication key of a user reference.

    The first of accountId, emailAddress and name that is not None wins.
    An empty or non-scalar key counts as no key.
    """
    if not isinstance(participant, dict):
        return None
    for key_field in IDENTITY_KEY_FIELDS:
        value = participant.get(key_field)
        if value is not None:
            if isinstance(value, (str, int)) and not isinstance(value, bool) and value != "":
                return str(value)
            return None
    return None


def _is_approval(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("approvers"), list)


def classify_field_value(value: Any) -> FieldShape:
    """Classify a custom field value by shape."""
    if isinstance(value, list):
        if value and _is_approval(value[0]):
            return FieldShape.APPROVAL_LIST
        return FieldShape.USER_LIST
    if isinstance(value, dict):
        if _is_approval(value):
            return FieldShape.APPROVAL
        return FieldShape.USER
    return FieldShape.UNRECOGNIZED


def _flatten_approvers(approvals: Iterable[Any]) -> List[Dict[str, Any]]:
    """Pull the approver references out of approval objects."""
    approvers = []
    for approval in approvals:
        if not _is_approval(approval):
            continue
        for wrapper in approval["approvers"]:
            if isinstance(wrapper, dict) and wrapper.get("approver"):
                approvers.append(wrapper["approver"])
    return approvers


def parse_custom_field_keys(custom_fields_setting: Optional[str]) -> List[str]:
    """Split a comma-separated field key list, dropping blanks."""
    if not custom_fields_setting or not isinstance(custom_fields_setting, str):
        return []
    return [key.strip() for key in custom_fields_setting.split(",") if key.strip()]


def _custom_field_participants(fields: Dict[str, Any], field_keys: List[str]) -> List[Any]:
    participants: List[Any] = []
    for field_key in field_keys:
        value = fields.get(field_key)
        shape = classify_field_value(value)

        if shape is FieldShape.APPROVAL_LIST:
            participants.extend(_flatten_approvers(value))
        elif shape is FieldShape.USER_LIST:
            participants.extend(value)
        elif shape is FieldShape.APPROVAL:
            participants.extend(_flatten_approvers([value]))
        elif shape is FieldShape.USER:
            participants.append(value)
    return participants


def extract_participants(fields: Dict[str, Any],
                         payload: Dict[str, Any],
                         custom_fields_setting: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Extract all unique participants referenced by an event.

    Args:
        fields: Issue fields
        payload: Full webhook payload
        custom_fields_setting: Comma-separated list of extra field keys holding users

    Returns:
        Participants in collection order, one per identity key (first occurrence wins)
    """
    fields = fields if isinstance(fields, dict) else {}
    payload = payload if isinstance(payload, dict) else {}

    participants: List[Any] = []
    for role in ("assignee", "reporter", "creator"):
        if fields.get(role):
            participants.append(fields[role])

    watches = fields.get("watches")
    if isinstance(watches, dict) and isinstance(watches.get("watchers"), list):
        participants.extend(watches["watchers"])

    # Native multi-approver list
    if isinstance(fields.get("approvers"), list):
        participants.extend(fields["approvers"])
    if isinstance(payload.get("approvers"), list):
        participants.extend(payload["approvers"])

    if payload.get("user"):
        participants.append(payload["user"])

    participants.extend(_custom_field_participants(fields, parse_custom_field_keys(custom_fields_setting)))

    unique: Dict[str, Dict[str, Any]] = {}
    for participant in participants:
        key = identity_key(participant)
        if key and key not in unique:
            unique[key] = participant

    logger.debug(f"Extracted {len(unique)} unique participants from {len(participants)} references")
    return list(unique.values())
