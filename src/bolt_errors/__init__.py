"""
bolt_errors – error taxonomy and normalization for the event-dispatch framework.

Import path convention::

    from bolt_errors import ErrorCode, as_coded_error
    from bolt_errors.kernel.errors import ContextMissingPropertyError
    from bolt_errors.application.listeners import ListenerRegistry
    from bolt_errors.observability.logging import get_logger
"""

from bolt_errors.kernel.errors import (
    BoltError,
    CodedError,
    ErrorCode,
    MultipleListenerError,
    UnknownError,
    as_coded_error,
    is_coded_error,
)

__version__ = "0.1.0"
__all__ = [
    "BoltError",
    "CodedError",
    "ErrorCode",
    "MultipleListenerError",
    "UnknownError",
    "__version__",
    "as_coded_error",
    "is_coded_error",
]
