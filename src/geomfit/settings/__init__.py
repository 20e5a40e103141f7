"""Settings management.

This package provides UserSettings: named bounding boxes and output
preferences loaded from config.yaml.
"""

from geomfit.settings.user import CONFIG_ENV_VAR, UserSettings

__all__ = ["CONFIG_ENV_VAR", "UserSettings"]
