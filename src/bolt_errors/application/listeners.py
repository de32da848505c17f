"""Application – ListenerRegistry and failure aggregation."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from bolt_errors.kernel.errors import MultipleListenerError

Listener = Callable[[Any], Awaitable[None] | None]


def raise_for_listener_failures(failures: Sequence[BaseException]) -> None:
    """Raise the outcome of a completed listener run.

    No failure returns normally, a single failure is re-raised as is, and two
    or more are bundled once into :class:`MultipleListenerError` in the order
    given.
    """
    if not failures:
        return
    if len(failures) == 1:
        raise failures[0]
    raise MultipleListenerError(failures)


class ListenerRegistry:
    """Registers listeners per event type and runs them concurrently.

    Listeners may be plain callables or coroutine functions. Every listener
    for an event runs to completion; failures are collected in registration
    order before anything is raised.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def register(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def listeners_for(self, event_type: str) -> list[Listener]:
        return list(self._listeners.get(event_type, []))

    async def dispatch(self, event_type: str, payload: Any) -> None:
        listeners = self.listeners_for(event_type)
        if not listeners:
            return
        results = await asyncio.gather(
            *(self._invoke(listener, payload) for listener in listeners),
            return_exceptions=True,
        )
        raise_for_listener_failures([r for r in results if isinstance(r, BaseException)])

    @staticmethod
    async def _invoke(listener: Listener, payload: Any) -> None:
        result = listener(payload)
        if inspect.isawaitable(result):
            await result


__all__ = ["Listener", "ListenerRegistry", "raise_for_listener_failures"]
