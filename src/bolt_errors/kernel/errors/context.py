"""Per-invocation context and property errors."""

from __future__ import annotations

from typing import Any

from bolt_errors.kernel.errors.base import BoltError
from bolt_errors.kernel.errors.codes import ErrorCode


class ContextMissingPropertyError(BoltError):
    """A required key is absent from the per-invocation context.

    ``missing_property`` names the exact key that was looked up.
    """

    error_code = ErrorCode.CONTEXT_MISSING_PROPERTY_ERROR

    def __init__(self, missing_property: str, message: str) -> None:
        super().__init__(message)
        self._missing_property = missing_property

    def _ctor_args(self) -> tuple[Any, ...]:
        return (self._missing_property, self._message)

    @property
    def missing_property(self) -> str:
        return self._missing_property

    def payload(self) -> dict[str, Any]:
        return {"missing_property": self._missing_property}


class InvalidCustomPropertyError(BoltError):
    """Custom properties collide with keys reserved by the framework.

    Reports ``ErrorCode.APP_INITIALIZATION_ERROR``, not
    ``ErrorCode.INVALID_CUSTOM_PROPERTY_ERROR``.
    """

    error_code = ErrorCode.APP_INITIALIZATION_ERROR


class AssistantMissingPropertyError(BoltError):
    """An assistant event lacks a property the assistant utilities require."""

    error_code = ErrorCode.ASSISTANT_MISSING_PROPERTY_ERROR


__all__ = [
    "AssistantMissingPropertyError",
    "ContextMissingPropertyError",
    "InvalidCustomPropertyError",
]
