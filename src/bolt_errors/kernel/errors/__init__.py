"""Kernel error taxonomy — public re-export surface.

Hierarchy::

    BoltError                               (base.py)
    ├── AppInitializationError              (initialization.py)
    ├── AssistantInitializationError
    ├── CustomRouteInitializationError
    ├── WorkflowStepInitializationError     deprecated
    ├── CustomFunctionInitializationError
    ├── ContextMissingPropertyError         (context.py)
    ├── InvalidCustomPropertyError          reports APP_INITIALIZATION_ERROR
    ├── AssistantMissingPropertyError
    ├── AuthorizationError                  (authorization.py)
    ├── ReceiverMultipleAckError            (receiver.py)
    ├── ReceiverAuthenticityError
    ├── ReceiverInconsistentStateError
    ├── HTTPReceiverDeferredRequestError
    ├── MultipleListenerError               (dispatch.py)
    ├── CustomFunctionCompleteSuccessError  (custom_function.py)
    ├── CustomFunctionCompleteFailError
    └── UnknownError                        (unknown.py)

Every failure leaving the framework passes through :func:`as_coded_error`.
"""

from bolt_errors.kernel.errors.authorization import AuthorizationError
from bolt_errors.kernel.errors.base import BoltError, CodedError
from bolt_errors.kernel.errors.classify import as_coded_error, is_coded_error
from bolt_errors.kernel.errors.codes import ErrorCode
from bolt_errors.kernel.errors.context import (
    AssistantMissingPropertyError,
    ContextMissingPropertyError,
    InvalidCustomPropertyError,
)
from bolt_errors.kernel.errors.custom_function import (
    CustomFunctionCompleteFailError,
    CustomFunctionCompleteSuccessError,
)
from bolt_errors.kernel.errors.dispatch import MultipleListenerError
from bolt_errors.kernel.errors.initialization import (
    AppInitializationError,
    AssistantInitializationError,
    CustomFunctionInitializationError,
    CustomRouteInitializationError,
    WorkflowStepInitializationError,
)
from bolt_errors.kernel.errors.receiver import (
    HTTPReceiverDeferredRequestError,
    ReceiverAuthenticityError,
    ReceiverInconsistentStateError,
    ReceiverMultipleAckError,
)
from bolt_errors.kernel.errors.unknown import UnknownError

__all__ = [
    "AppInitializationError",
    "AssistantInitializationError",
    "AssistantMissingPropertyError",
    "AuthorizationError",
    "BoltError",
    "CodedError",
    "ContextMissingPropertyError",
    "CustomFunctionCompleteFailError",
    "CustomFunctionCompleteSuccessError",
    "CustomFunctionInitializationError",
    "CustomRouteInitializationError",
    "ErrorCode",
    "HTTPReceiverDeferredRequestError",
    "InvalidCustomPropertyError",
    "MultipleListenerError",
    "ReceiverAuthenticityError",
    "ReceiverInconsistentStateError",
    "ReceiverMultipleAckError",
    "UnknownError",
    "WorkflowStepInitializationError",
    "as_coded_error",
    "is_coded_error",
]
