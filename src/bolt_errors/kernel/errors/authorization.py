"""Authorization errors."""

from __future__ import annotations

from typing import Any

from bolt_errors.kernel.errors.base import BoltError
from bolt_errors.kernel.errors.codes import ErrorCode


class AuthorizationError(BoltError):
    """Resolving credentials for an incoming event failed.

    ``original`` is the failure raised by the authorize function, kept
    unmodified and chained as ``__cause__`` when it is an exception.
    """

    error_code = ErrorCode.AUTHORIZATION_ERROR

    def __init__(self, message: str, original: Any) -> None:
        super().__init__(message)
        self._original = original
        if isinstance(original, BaseException):
            self.__cause__ = original

    def _ctor_args(self) -> tuple[Any, ...]:
        return (self._message, self._original)

    @property
    def original(self) -> Any:
        return self._original

    def payload(self) -> dict[str, Any]:
        return {"original": self._original}


__all__ = ["AuthorizationError"]
