"""Settings reader backed by environment configuration."""

import logging
from typing import Any, Optional

from ..config import Settings, settings as default_settings
from ..core.capabilities import SettingsReader


logger = logging.getLogger(__name__)


class EnvironmentSettingsReader(SettingsReader):
    """Serves notifier settings from the pydantic Settings object."""

    def __init__(self, app_settings: Optional[Settings] = None):
        self.settings = app_settings or default_settings

    async def get_value(self, key: str) -> Any:
        value = getattr(self.settings, key, None)
        logger.debug(f"Setting {key} -> {'<unset>' if value is None else type(value).__name__}")
        return value
