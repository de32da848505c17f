"""Config settings – environment-based configuration."""
from bolt_errors.config.settings.base import Settings
from bolt_errors.config.settings.error_handling import ErrorHandlingSettings
from bolt_errors.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ErrorHandlingSettings", "Settings", "SettingsLoader"]
