"""Custom function lifecycle errors."""

from __future__ import annotations

from bolt_errors.kernel.errors.base import BoltError
from bolt_errors.kernel.errors.codes import ErrorCode


class CustomFunctionCompleteSuccessError(BoltError):
    """Reporting successful completion of a custom function failed."""

    error_code = ErrorCode.CUSTOM_FUNCTION_COMPLETE_SUCCESS_ERROR


class CustomFunctionCompleteFailError(BoltError):
    """Reporting a failed custom function execution failed."""

    error_code = ErrorCode.CUSTOM_FUNCTION_COMPLETE_FAIL_ERROR


__all__ = ["CustomFunctionCompleteFailError", "CustomFunctionCompleteSuccessError"]
