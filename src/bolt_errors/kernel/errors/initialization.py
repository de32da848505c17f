"""Initialization-time errors, fatal and surfaced once while building the app."""

from __future__ import annotations

import warnings

from bolt_errors.kernel.errors.base import BoltError
from bolt_errors.kernel.errors.codes import ErrorCode


class AppInitializationError(BoltError):
    """The app was configured with invalid or conflicting options."""

    error_code = ErrorCode.APP_INITIALIZATION_ERROR


class AssistantInitializationError(BoltError):
    """An assistant was registered without its required handlers."""

    error_code = ErrorCode.ASSISTANT_INITIALIZATION_ERROR


class CustomRouteInitializationError(BoltError):
    """A custom HTTP route definition is malformed."""

    error_code = ErrorCode.CUSTOM_ROUTE_INITIALIZATION_ERROR


class WorkflowStepInitializationError(BoltError):
    """A workflow step was registered with an invalid configuration.

    .. deprecated::
        Steps from apps are no longer supported; this error is scheduled for
        removal in the next major release.
    """

    error_code = ErrorCode.WORKFLOW_STEP_INITIALIZATION_ERROR

    def __init__(self, message: str | None = None) -> None:
        warnings.warn(
            "WorkflowStepInitializationError is deprecated and will be removed "
            "in the next major release",
            DeprecationWarning,
            stacklevel=2,
        )
        super().__init__(message)


class CustomFunctionInitializationError(BoltError):
    """A custom function was registered with an invalid callback set."""

    error_code = ErrorCode.CUSTOM_FUNCTION_INITIALIZATION_ERROR


__all__ = [
    "AppInitializationError",
    "AssistantInitializationError",
    "CustomFunctionInitializationError",
    "CustomRouteInitializationError",
    "WorkflowStepInitializationError",
]
