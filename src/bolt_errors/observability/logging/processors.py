"""Observability – structlog processors and get_logger helper.

CodedErrorProcessor: flattens a coded ``error`` entry into log fields.
get_logger(name): returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog

from bolt_errors.kernel.errors import is_coded_error


class CodedErrorProcessor:
    """structlog processor that exposes the classification of ``error``.

    When the event dict carries an ``error`` value with a ``code``, adds:

    * ``error_code`` (the enum value, or the raw code for foreign errors)
    * ``error_message``
    * ``error_originals``: number of aggregated failures, aggregator only
    * ``error_missing_property``: context-property variant only

    Usage::

        structlog.configure(processors=[CodedErrorProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        error = event_dict.get("error")
        if error is None or not is_coded_error(error):
            return event_dict
        code = error.code
        event_dict.setdefault("error_code", getattr(code, "value", code))
        message = getattr(error, "message", None)
        event_dict.setdefault("error_message", message if isinstance(message, str) else str(error))
        originals = getattr(error, "originals", None)
        if originals is not None:
            event_dict.setdefault("error_originals", len(originals))
        missing = getattr(error, "missing_property", None)
        if missing is not None:
            event_dict.setdefault("error_missing_property", missing)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["CodedErrorProcessor", "get_logger"]
