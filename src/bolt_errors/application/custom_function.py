"""Application – custom function registration and completion."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from bolt_errors.kernel.errors import (
    CustomFunctionCompleteFailError,
    CustomFunctionCompleteSuccessError,
    CustomFunctionInitializationError,
)

#: Posts a platform API call: ``call(method, params)``.
ApiCall = Callable[[str, Mapping[str, Any]], Awaitable[Any]]


def validate_function_listeners(callback_id: Any, listeners: Any) -> list[Callable[..., Any]]:
    """Check a custom function registration and return its listeners as a list."""
    if not isinstance(callback_id, str) or not callback_id:
        raise CustomFunctionInitializationError(
            "CustomFunction expects a callback_id as the first argument"
        )
    if callable(listeners):
        listeners = [listeners]
    if not isinstance(listeners, Sequence) or not listeners:
        raise CustomFunctionInitializationError(
            "CustomFunction expects a function or sequence of functions as the second argument"
        )
    if not all(callable(fn) for fn in listeners):
        raise CustomFunctionInitializationError("All CustomFunction middleware must be functions")
    return list(listeners)


class FunctionCompletion:
    """``complete`` / ``fail`` helpers bound to one function execution.

    Both raise when the execution id is unknown; API failures are wrapped so
    the handler sees the lifecycle code with the API error as ``__cause__``.
    """

    def __init__(self, function_execution_id: str | None, call: ApiCall) -> None:
        self._execution_id = function_execution_id
        self._call = call

    async def complete(self, outputs: Mapping[str, Any] | None = None) -> Any:
        if not self._execution_id:
            raise CustomFunctionCompleteSuccessError(
                "No function_execution_id found; cannot complete the function"
            )
        params = {"function_execution_id": self._execution_id, "outputs": dict(outputs or {})}
        try:
            return await _await(self._call("functions.completeSuccess", params))
        except Exception as exc:
            raise CustomFunctionCompleteSuccessError(str(exc)) from exc

    async def fail(self, error: str) -> Any:
        if not self._execution_id:
            raise CustomFunctionCompleteFailError(
                "No function_execution_id found; cannot fail the function"
            )
        params = {"function_execution_id": self._execution_id, "error": error}
        try:
            return await _await(self._call("functions.completeError", params))
        except Exception as exc:
            raise CustomFunctionCompleteFailError(str(exc)) from exc


async def _await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


__all__ = ["ApiCall", "FunctionCompletion", "validate_function_listeners"]
