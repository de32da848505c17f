"""Receivers – start/stop state tracking."""
from __future__ import annotations

from bolt_errors.kernel.errors import ReceiverInconsistentStateError


class ReceiverLifecycle:
    """Guards receiver start/stop transitions."""

    def __init__(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            raise ReceiverInconsistentStateError(
                "The receiver cannot be started because it is already running."
            )
        self._running = True

    def stop(self) -> None:
        if not self._running:
            raise ReceiverInconsistentStateError(
                "The receiver cannot be stopped because it is not running."
            )
        self._running = False


__all__ = ["ReceiverLifecycle"]
