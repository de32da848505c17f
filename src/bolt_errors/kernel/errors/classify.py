"""Classification and normalization of arbitrary failure values."""

from __future__ import annotations

from typing import Any

from bolt_errors.kernel.errors.base import CodedError
from bolt_errors.kernel.errors.unknown import UnknownError


def is_coded_error(value: Any) -> bool:
    """Return ``True`` when *value* carries a ``code`` attribute.

    The check is structural and ignores the value's type, so errors from
    other libraries qualify too. Any object with a ``code`` attribute passes,
    including ones that are not errors at all (``SystemExit`` and
    ``urllib.error.HTTPError`` among them); that looseness is accepted.
    """
    try:
        return hasattr(value, "code")
    except Exception:  # noqa: BLE001
        return False


def as_coded_error(value: Any) -> CodedError:
    """Return *value* as something that satisfies :class:`CodedError`.

    Coded values come back as the very same object. Anything else is wrapped
    in :class:`UnknownError`, which keeps *value* as ``original``.
    """
    if is_coded_error(value):
        return value
    return UnknownError(value)


__all__ = ["as_coded_error", "is_coded_error"]
