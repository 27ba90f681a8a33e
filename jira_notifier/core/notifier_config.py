"""
Per-event notifier configuration.

All four notifier settings are read once, before any pipeline stage runs,
and handed to the pipeline as a NotifierConfig. Read failures and malformed
values fall back to defaults and are reported as warnings.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .capabilities import SettingsReader
from .exceptions import ConfigurationError
from .identity_resolver import parse_user_mapping


logger = logging.getLogger(__name__)

USER_MAPPING_JSON = "user_mapping_json"
USER_MAPPING_FIELD = "user_mapping_field"
CUSTOM_USER_FIELDS = "custom_user_fields"
SKIP_INTERNAL_COMMENTS = "skip_internal_comments"

DEFAULT_MAPPING_FIELD = "name"

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


@dataclass
class NotifierConfig:
    """Notifier settings resolved for a single event."""
    user_mapping: Dict[str, str] = field(default_factory=dict)
    mapping_field: str = DEFAULT_MAPPING_FIELD
    custom_user_fields: str = ""
    skip_internal_comments: bool = False
    warnings: List[str] = field(default_factory=list)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS | _FALSE_STRINGS:
        return value.strip().lower() in _TRUE_STRINGS
    raise ConfigurationError(
        f"Expected a boolean, got {value!r}",
        config_key=SKIP_INTERNAL_COMMENTS,
        expected_type="bool"
    )


async def _read(reader: SettingsReader, key: str, warnings: List[str]) -> Any:
    try:
        return await reader.get_value(key)
    except Exception as e:
        logger.warning(f"Could not read {key}: {e}")
        warnings.append(f"Could not read {key}: {e}")
        return None


async def load_notifier_config(reader: SettingsReader) -> NotifierConfig:
    """Read and validate the notifier settings."""
    config = NotifierConfig()
    warnings = config.warnings

    raw_mapping = await _read(reader, USER_MAPPING_JSON, warnings)
    config.user_mapping, mapping_warnings = parse_user_mapping(raw_mapping)
    warnings.extend(mapping_warnings)

    mapping_field = await _read(reader, USER_MAPPING_FIELD, warnings)
    if isinstance(mapping_field, str) and mapping_field.strip():
        config.mapping_field = mapping_field.strip()
    elif mapping_field not in (None, ""):
        logger.warning(f"Invalid user_mapping_field {mapping_field!r}, using '{DEFAULT_MAPPING_FIELD}'")
        warnings.append(f"Invalid user_mapping_field; using '{DEFAULT_MAPPING_FIELD}'")

    custom_fields = await _read(reader, CUSTOM_USER_FIELDS, warnings)
    if isinstance(custom_fields, str):
        config.custom_user_fields = custom_fields
    elif custom_fields is not None:
        logger.warning(f"Invalid custom_user_fields {custom_fields!r}, ignoring")
        warnings.append("Invalid custom_user_fields; expected a comma-separated string")

    skip_internal = await _read(reader, SKIP_INTERNAL_COMMENTS, warnings)
    if skip_internal is not None:
        try:
            config.skip_internal_comments = _coerce_bool(skip_internal)
        except ConfigurationError as e:
            logger.warning(f"Invalid skip_internal_comments: {e}")
            warnings.append(f"Invalid skip_internal_comments: {e}")

    return config
