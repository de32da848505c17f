"""Application – authorization boundary."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any

from bolt_errors.kernel.errors import AuthorizationError
from bolt_errors.observability.logging import get_logger

_log = get_logger(__name__)

AuthorizeFn = Callable[[Mapping[str, Any]], Any]


async def authorize(fn: AuthorizeFn, source: Mapping[str, Any]) -> Any:
    """Resolve credentials for an event *source* (team, enterprise, user ids).

    *fn* may be sync or async. Any failure it raises is wrapped in
    :class:`AuthorizationError` with the failure kept as ``original``.
    """
    try:
        result = fn(source)
        if inspect.isawaitable(result):
            result = await result
    except Exception as exc:
        _log.warning(
            "authorization_failed",
            detail="Authorization of incoming event did not succeed. No listeners will be called.",
            error=exc,
        )
        raise AuthorizationError("Failed to authorize the incoming event", exc) from exc
    return result


__all__ = ["AuthorizeFn", "authorize"]
