"""
config - Settings of the update-dependencies script.

This module provides:
- Config: Lazily resolve settings from the system environment, one variable per setting.
- EnvSetting: The memoized descriptor behind each Config setting.
"""

from .env_config import Config, get_config  # noqa: F401
from .setting import ConfigurationError, EnvSetting, split_list  # noqa: F401
