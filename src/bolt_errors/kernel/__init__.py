"""Kernel – framework-agnostic error taxonomy."""

from bolt_errors.kernel.errors import (
    BoltError,
    CodedError,
    ErrorCode,
    UnknownError,
    as_coded_error,
    is_coded_error,
)

__all__ = [
    "BoltError",
    "CodedError",
    "ErrorCode",
    "UnknownError",
    "as_coded_error",
    "is_coded_error",
]
