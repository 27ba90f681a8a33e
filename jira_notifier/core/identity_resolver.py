"""
Identity resolution from Jira participants to chat accounts.

A participant's attribute named by the mapping field (``name`` or
``emailAddress``) is looked up in the explicit user mapping; when no mapping
entry exists the attribute value itself is used as the chat username.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from .capabilities import UserDirectory
from .exceptions import describe_error
from .outcomes import FailureReason, MappingOutput, ResolutionResult


logger = logging.getLogger(__name__)


def parse_user_mapping(raw_mapping: Any) -> Tuple[Dict[str, str], List[str]]:
    """
    Parse the JSON user mapping setting.

    Args:
        raw_mapping: JSON object text mapping Jira identifiers to chat usernames

    Returns:
        Tuple of (mapping, warnings). Malformed input yields an empty mapping and a warning.
    """
    warnings: List[str] = []
    if raw_mapping is None or raw_mapping == "":
        return {}, warnings

    if isinstance(raw_mapping, dict):
        decoded = raw_mapping
    else:
        try:
            decoded = json.loads(raw_mapping)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid user_mapping_json: {e}")
            warnings.append(f"Invalid JSON in user_mapping_json: {e}")
            return {}, warnings

    if not isinstance(decoded, dict):
        logger.warning(f"user_mapping_json is not a JSON object: {type(decoded).__name__}")
        warnings.append("user_mapping_json must be a JSON object; ignoring it")
        return {}, warnings

    mapping: Dict[str, str] = {}
    for jira_id, chat_username in decoded.items():
        if isinstance(chat_username, str):
            mapping[jira_id] = chat_username
        else:
            warnings.append(f"Ignoring user_mapping_json entry for {jira_id}: value is not a string")

    return mapping, warnings


def destination_username(participant: Dict[str, Any],
                         mapping_field: str,
                         user_mapping: Dict[str, str]) -> Optional[str]:
    """Derive the chat username for a participant, or None when it has no identifier."""
    raw_key = participant.get(mapping_field) if isinstance(participant, dict) else None
    if not raw_key or not isinstance(raw_key, str):
        return None
    return user_mapping.get(raw_key) or raw_key


class IdentityResolver:
    """Maps participants onto accounts in the chat user directory."""

    def __init__(self, directory: UserDirectory):
        self.directory = directory
        self.logger = logging.getLogger(__name__)

    async def resolve(self,
                      participants: List[Dict[str, Any]],
                      mapping_field: str,
                      user_mapping: Dict[str, str]) -> MappingOutput:
        """
        Resolve every participant, in order.

        Returns:
            MappingOutput with exactly one result per participant
        """
        output = MappingOutput()

        for participant in participants:
            username = destination_username(participant, mapping_field, user_mapping)
            if not username:
                self.logger.warning(f"Participant missing {mapping_field}: {json.dumps(participant, default=str)}")
                output.results.append(ResolutionResult(
                    participant=participant,
                    error=FailureReason.NO_IDENTIFIER
                ))
                continue

            try:
                user = await self.directory.find_user_by_username(username)
            except Exception as e:
                self.logger.error(f"Error finding chat user for {username}: {describe_error(e)}")
                output.warnings.append(f"Lookup failed for {username}: {e}")
                output.results.append(ResolutionResult(
                    participant=participant,
                    username=username,
                    error=FailureReason.LOOKUP_ERROR,
                    detail=str(e)
                ))
                continue

            if user is None:
                self.logger.warning(f"User not found: {username}")
                output.results.append(ResolutionResult(
                    participant=participant,
                    username=username,
                    error=FailureReason.NOT_FOUND
                ))
                continue

            output.results.append(ResolutionResult(
                participant=participant,
                username=username,
                user=user
            ))

        resolved = sum(1 for result in output.results if result.resolved)
        self.logger.info(f"Resolved {resolved}/{len(participants)} participants")
        return output
