"""Application – assistant thread helpers."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from bolt_errors.kernel.errors import AssistantInitializationError, AssistantMissingPropertyError

_REQUIRED_HANDLERS = ("thread_started", "user_message")


@dataclasses.dataclass(frozen=True)
class ThreadInfo:
    """Where an assistant conversation lives."""

    channel_id: str
    thread_ts: str
    context: Mapping[str, Any] = dataclasses.field(default_factory=dict)


def validate_assistant_handlers(handlers: Mapping[str, Any]) -> None:
    """Raise :class:`AssistantInitializationError` unless required handlers are callable."""
    missing = [name for name in _REQUIRED_HANDLERS if not callable(handlers.get(name))]
    if missing:
        raise AssistantInitializationError(
            f"Assistant is missing required handlers: {', '.join(missing)}"
        )


def extract_thread_info(payload: Mapping[str, Any]) -> ThreadInfo:
    """Locate the assistant thread of a ``assistant_thread_*`` or message event."""
    thread = payload.get("assistant_thread")
    if isinstance(thread, Mapping):
        channel_id = thread.get("channel_id")
        thread_ts = thread.get("thread_ts")
        context = thread.get("context") or {}
    else:
        channel_id = payload.get("channel")
        thread_ts = payload.get("thread_ts")
        context = {}

    missing = [name for name, value in (("channel_id", channel_id), ("thread_ts", thread_ts)) if not value]
    if missing:
        raise AssistantMissingPropertyError(
            f"Assistant message event is missing required properties: {', '.join(missing)}"
        )
    return ThreadInfo(channel_id=channel_id, thread_ts=thread_ts, context=context)


__all__ = ["ThreadInfo", "extract_thread_info", "validate_assistant_handlers"]
