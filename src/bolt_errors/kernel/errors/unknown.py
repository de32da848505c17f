"""Fallback error for failures the framework did not classify."""

from __future__ import annotations

from typing import Any

from bolt_errors.kernel.errors.base import BoltError
from bolt_errors.kernel.errors.codes import ErrorCode


def describe(value: Any) -> str:
    """Return the human-readable message of an arbitrary failure value.

    Prefers a string ``message`` attribute, then ``str(value)``. Never raises.
    """
    try:
        message = getattr(value, "message", None)
        if isinstance(message, str):
            return message
        return str(value)
    except Exception:  # noqa: BLE001
        return object.__repr__(value)


class UnknownError(BoltError):
    """Wraps a failure that carries no classification code.

    The message is copied from ``original`` and ``original`` itself is kept
    unmodified, so nothing about the source failure is lost.
    """

    error_code = ErrorCode.UNKNOWN_ERROR

    def __init__(self, original: Any) -> None:
        super().__init__(describe(original))
        self._original = original
        if isinstance(original, BaseException):
            self.__cause__ = original

    def _ctor_args(self) -> tuple[Any, ...]:
        return (self._original,)

    @property
    def original(self) -> Any:
        return self._original

    def payload(self) -> dict[str, Any]:
        return {"original": self._original}


__all__ = ["UnknownError", "describe"]
