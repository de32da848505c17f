"""Config – settings, loaders and validation errors."""

from bolt_errors.config.settings import (
    EnvSettingsLoader,
    ErrorHandlingSettings,
    Settings,
    SettingsLoader,
)
from bolt_errors.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ErrorHandlingSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
