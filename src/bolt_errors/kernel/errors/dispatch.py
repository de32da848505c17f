"""Listener dispatch errors."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bolt_errors.kernel.errors.base import BoltError
from bolt_errors.kernel.errors.codes import ErrorCode


class MultipleListenerError(BoltError):
    """Several listeners for the same event failed.

    ``originals`` holds every underlying failure in the order the dispatcher
    collected them. No deduplication is applied and the sequence is frozen at
    construction.
    """

    error_code = ErrorCode.MULTIPLE_LISTENER_ERROR
    default_message = (
        "Multiple errors occurred while handling several listeners. "
        "The `originals` property contains each error."
    )

    def __init__(self, originals: Iterable[Any]) -> None:
        super().__init__()
        self._originals = tuple(originals)

    def _ctor_args(self) -> tuple[Any, ...]:
        return (self._originals,)

    @property
    def originals(self) -> tuple[Any, ...]:
        return self._originals

    def payload(self) -> dict[str, Any]:
        return {"originals": self._originals}


__all__ = ["MultipleListenerError"]
