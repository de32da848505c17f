"""Application – global error handler boundary.

Every failure that escapes event processing is normalized with
:func:`as_coded_error` here before the application's handler sees it.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable, Mapping
from typing import Any

from bolt_errors.config.settings import ErrorHandlingSettings
from bolt_errors.kernel.errors import CodedError, as_coded_error
from bolt_errors.observability.logging import Logger, get_logger


@dataclasses.dataclass(frozen=True)
class ExtendedErrorHandlerArgs:
    """Argument passed to handlers registered in extended mode."""

    error: CodedError
    logger: Logger
    context: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    body: Any = None


ErrorHandler = Callable[[CodedError], Any]
ExtendedErrorHandler = Callable[[ExtendedErrorHandlerArgs], Any]


def default_error_handler(logger: Logger) -> ErrorHandler:
    """Build the handler used when the app registers none.

    It logs the error and re-raises it. Coded values that are not exceptions
    cannot be raised and are only logged.
    """

    def _handle(error: CodedError) -> None:
        logger.error("unhandled_error", error=error)
        if isinstance(error, BaseException):
            raise error

    return _handle


class ErrorHandlerDispatcher:
    """Normalizes failures and hands them to the application's handler.

    Args:
        handler: Plain handler (``handler(error)``) or, when
            ``settings.extended_error_handler`` is set, extended handler
            (``handler(ExtendedErrorHandlerArgs)``). Sync or async.
        settings: Defaults to :class:`ErrorHandlingSettings` defaults.
        logger: Passed to extended handlers and used by the default handler.
    """

    def __init__(
        self,
        handler: ErrorHandler | ExtendedErrorHandler | None = None,
        *,
        settings: ErrorHandlingSettings | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._settings = settings or ErrorHandlingSettings()
        self._logger: Logger = logger if logger is not None else get_logger(__name__)
        self._handler = handler

    @property
    def extended(self) -> bool:
        return self._settings.extended_error_handler

    async def handle(
        self,
        error: Any,
        *,
        context: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        coded = as_coded_error(error)
        if self._handler is None:
            result = default_error_handler(self._logger)(coded)
        elif self.extended:
            args = ExtendedErrorHandlerArgs(
                error=coded, logger=self._logger, context=dict(context or {}), body=body
            )
            result = self._handler(args)  # type: ignore[arg-type]
        else:
            result = self._handler(coded)  # type: ignore[arg-type]
        if inspect.isawaitable(result):
            result = await result
        return result


__all__ = [
    "ErrorHandler",
    "ErrorHandlerDispatcher",
    "ExtendedErrorHandler",
    "ExtendedErrorHandlerArgs",
    "default_error_handler",
]
