"""Application – collaborator boundaries that raise and consume coded errors."""

from bolt_errors.application.assistant import ThreadInfo, extract_thread_info, validate_assistant_handlers
from bolt_errors.application.authorization import authorize
from bolt_errors.application.context import RESERVED_KEYS, Context
from bolt_errors.application.custom_function import FunctionCompletion, validate_function_listeners
from bolt_errors.application.handler import (
    ErrorHandlerDispatcher,
    ExtendedErrorHandlerArgs,
    default_error_handler,
)
from bolt_errors.application.listeners import ListenerRegistry, raise_for_listener_failures

__all__ = [
    "RESERVED_KEYS",
    "Context",
    "ErrorHandlerDispatcher",
    "ExtendedErrorHandlerArgs",
    "FunctionCompletion",
    "ListenerRegistry",
    "ThreadInfo",
    "authorize",
    "default_error_handler",
    "extract_thread_info",
    "raise_for_listener_failures",
    "validate_assistant_handlers",
    "validate_function_listeners",
]
