"""Root error class and structural contract for framework errors."""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, runtime_checkable

from bolt_errors.kernel.errors.codes import ErrorCode


@runtime_checkable
class CodedError(Protocol):
    """Anything exposing a classification ``code``.

    Structural: values this package never created (another library's error,
    a plain object) satisfy it as long as they carry a ``code`` attribute.
    Optional payload (``original``, ``originals``, ``missing_property``,
    ``req``, ``res``) is only present on the variants that define it.
    """

    code: Any


class BoltError(Exception):
    """Root of the framework error hierarchy.

    Each subclass binds exactly one :class:`ErrorCode` through
    ``error_code``. The code is exposed read-only and cannot be changed per
    instance.

    Args:
        message: Human-readable description. Falls back to
            ``default_message`` when omitted.
    """

    error_code: ClassVar[ErrorCode]
    default_message: ClassVar[str] = ""

    def __init__(self, message: str | None = None) -> None:
        if not hasattr(type(self), "error_code"):
            raise TypeError(f"{type(self).__name__} does not bind an ErrorCode")
        text = self.default_message if message is None else message
        super().__init__(text)
        self._message = text

    @property
    def code(self) -> ErrorCode:
        return type(self).error_code

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"

    def _ctor_args(self) -> tuple[Any, ...]:
        """Positional arguments that rebuild this instance through its constructor."""
        return (self._message,)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), self._ctor_args(), self.__dict__)

    def payload(self) -> dict[str, Any]:
        """Variant-specific fields; empty for variants that only carry a code."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Flatten to a plain dict for structured logging.

        Foreign payload values are rendered with :func:`repr`.
        """
        data: dict[str, Any] = {"code": self.code.value, "message": self.message}
        for key, value in self.payload().items():
            if isinstance(value, tuple):
                data[key] = [_render(v) for v in value]
            else:
                data[key] = _render(value)
        return data


def _render(value: Any) -> Any:
    if isinstance(value, BoltError):
        return value.to_dict()
    if isinstance(value, str):
        return value
    return repr(value)


__all__ = ["BoltError", "CodedError"]
