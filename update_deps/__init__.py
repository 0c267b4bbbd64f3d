"""
update_deps - configuration for the update-dependencies CI script.
"""

from .config import Config, ConfigurationError, get_config  # noqa: F401
