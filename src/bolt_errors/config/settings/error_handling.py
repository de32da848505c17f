"""Config settings – ErrorHandlingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from bolt_errors.config.settings.base import Settings
from bolt_errors.config.validation import InvalidSettingValueError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class ErrorHandlingSettings(Settings):
    """Knobs for the global error handler and the receiver boundary.

    Read from ``BOLT_EXTENDED_ERROR_HANDLER``, ``BOLT_LOG_LEVEL`` and
    ``BOLT_SIGNATURE_MAX_AGE_SECONDS``.
    """

    _prefix: ClassVar[str] = "BOLT"

    extended_error_handler: bool = False
    log_level: str = "INFO"
    signature_max_age_seconds: int = 300

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )
        if self.signature_max_age_seconds <= 0:
            raise InvalidSettingValueError(
                "signature_max_age_seconds", self.signature_max_age_seconds, "must be positive"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["ErrorHandlingSettings"]
