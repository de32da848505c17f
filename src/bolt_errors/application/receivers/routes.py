"""Receivers – custom HTTP routes."""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from bolt_errors.kernel.errors import CustomRouteInitializationError, HTTPReceiverDeferredRequestError

RouteHandler = Callable[[Any, Any], Any]

_REQUIRED_KEYS = ("path", "method", "handler")


def build_receiver_routes(custom_routes: Iterable[Mapping[str, Any]]) -> dict[str, dict[str, RouteHandler]]:
    """Index route definitions as ``{path: {METHOD: handler}}``.

    Each definition needs ``path``, ``method`` (a string or a list of them)
    and ``handler``. Incomplete definitions raise
    :class:`CustomRouteInitializationError` listing every offending route.
    """
    routes: dict[str, dict[str, RouteHandler]] = {}
    problems: list[str] = []
    for index, route in enumerate(custom_routes):
        missing = [key for key in _REQUIRED_KEYS if not route.get(key)]
        if missing:
            problems.append(f"route {index} missing {', '.join(missing)}")
            continue
        methods = route["method"]
        if isinstance(methods, str):
            methods = [methods]
        for method in methods:
            routes.setdefault(route["path"], {})[method.upper()] = route["handler"]
    if problems:
        raise CustomRouteInitializationError(
            f"One or more routes in custom routes are missing required keys: {'; '.join(problems)}"
        )
    return routes


class ReceiverRouter:
    """Dispatches HTTP requests to custom routes.

    Requests that match no route raise
    :class:`HTTPReceiverDeferredRequestError` carrying the untouched
    ``req``/``res`` handles so the caller can fall through to its own
    routing.
    """

    def __init__(self, custom_routes: Iterable[Mapping[str, Any]] = ()) -> None:
        self._routes = build_receiver_routes(custom_routes)

    def route(self, method: str, path: str, req: Any, res: Any) -> Any:
        handler = self._routes.get(path, {}).get(method.upper())
        if handler is None:
            raise HTTPReceiverDeferredRequestError(
                f"Unhandled HTTP request ({method.upper()}) made to {path}", req, res
            )
        return handler(req, res)


__all__ = ["ReceiverRouter", "RouteHandler", "build_receiver_routes"]
