"""Receivers – single-use acknowledgement."""
from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from bolt_errors.kernel.errors import ReceiverMultipleAckError


class Ack:
    """Acknowledge an incoming request exactly once.

    *respond* receives the optional response body and may be sync or async.
    A second call raises :class:`ReceiverMultipleAckError` without invoking
    *respond* again.
    """

    def __init__(self, respond: Callable[[Any], Any] | None = None) -> None:
        self._respond = respond
        self._acknowledged = False

    @property
    def acknowledged(self) -> bool:
        return self._acknowledged

    async def __call__(self, response: Any = None) -> None:
        if self._acknowledged:
            raise ReceiverMultipleAckError()
        self._acknowledged = True
        if self._respond is not None:
            result = self._respond(response)
            if inspect.isawaitable(result):
                await result


__all__ = ["Ack"]
