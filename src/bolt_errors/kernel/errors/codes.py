"""Kernel errors – ErrorCode registry.

The registry is closed: every code the framework can report is listed here.
Values are stable strings and part of the public compatibility surface;
adding a member is additive, renaming or removing one is breaking.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable classification of a framework failure."""

    APP_INITIALIZATION_ERROR = "slack_bolt_app_initialization_error"

    ASSISTANT_INITIALIZATION_ERROR = "slack_bolt_assistant_initialization_error"
    ASSISTANT_MISSING_PROPERTY_ERROR = "slack_bolt_assistant_missing_property_error"

    AUTHORIZATION_ERROR = "slack_bolt_authorization_error"

    CONTEXT_MISSING_PROPERTY_ERROR = "slack_bolt_context_missing_property_error"
    INVALID_CUSTOM_PROPERTY_ERROR = "slack_bolt_context_invalid_custom_property_error"

    CUSTOM_ROUTE_INITIALIZATION_ERROR = "slack_bolt_custom_route_initialization_error"

    RECEIVER_MULTIPLE_ACK_ERROR = "slack_bolt_receiver_ack_multiple_error"
    RECEIVER_AUTHENTICITY_ERROR = "slack_bolt_receiver_authenticity_error"
    RECEIVER_INCONSISTENT_STATE_ERROR = "slack_bolt_receiver_inconsistent_state_error"

    MULTIPLE_LISTENER_ERROR = "slack_bolt_multiple_listener_error"

    HTTP_RECEIVER_DEFERRED_REQUEST_ERROR = "slack_bolt_http_receiver_deferred_request_error"

    # Assigned to failures raised inside the framework that carry no code.
    UNKNOWN_ERROR = "slack_bolt_unknown_error"

    # Deprecated: workflow steps are scheduled for removal.
    WORKFLOW_STEP_INITIALIZATION_ERROR = "slack_bolt_workflow_step_initialization_error"

    CUSTOM_FUNCTION_INITIALIZATION_ERROR = "slack_bolt_custom_function_initialization_error"
    CUSTOM_FUNCTION_COMPLETE_SUCCESS_ERROR = "slack_bolt_custom_function_complete_success_error"
    CUSTOM_FUNCTION_COMPLETE_FAIL_ERROR = "slack_bolt_custom_function_complete_fail_error"


__all__ = ["ErrorCode"]
