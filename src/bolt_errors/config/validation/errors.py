"""Config validation errors."""
from typing import Any

from bolt_errors.kernel.errors import AppInitializationError


class ConfigError(AppInitializationError):
    """Raised when configuration is invalid or loading failed."""


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name

    def _ctor_args(self) -> tuple[Any, ...]:
        return (self.setting_name,)


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason

    def _ctor_args(self) -> tuple[Any, ...]:
        return (self.setting_name, self.value, self.reason)


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
