"""Receiver / transport errors."""

from __future__ import annotations

from typing import Any

from bolt_errors.kernel.errors.base import BoltError
from bolt_errors.kernel.errors.codes import ErrorCode


class ReceiverMultipleAckError(BoltError):
    """``ack`` was called more than once for the same request."""

    error_code = ErrorCode.RECEIVER_MULTIPLE_ACK_ERROR
    default_message = "The receiver's `ack` function was called multiple times."

    def __init__(self) -> None:
        super().__init__()

    def _ctor_args(self) -> tuple[Any, ...]:
        return ()


class ReceiverAuthenticityError(BoltError):
    """The request signature could not be verified."""

    error_code = ErrorCode.RECEIVER_AUTHENTICITY_ERROR


class ReceiverInconsistentStateError(BoltError):
    """The receiver reached a state it cannot recover from."""

    error_code = ErrorCode.RECEIVER_INCONSISTENT_STATE_ERROR


class HTTPReceiverDeferredRequestError(BoltError):
    """The HTTP exchange could not be completed within the expected window.

    ``req`` and ``res`` are the live transport handles, passed by reference
    so the transport layer can still respond or clean up. This error never
    closes or mutates them.
    """

    error_code = ErrorCode.HTTP_RECEIVER_DEFERRED_REQUEST_ERROR

    def __init__(self, message: str, req: Any, res: Any) -> None:
        super().__init__(message)
        self._req = req
        self._res = res

    def _ctor_args(self) -> tuple[Any, ...]:
        return (self._message, self._req, self._res)

    @property
    def req(self) -> Any:
        return self._req

    @property
    def res(self) -> Any:
        return self._res

    def payload(self) -> dict[str, Any]:
        return {"req": self._req, "res": self._res}


__all__ = [
    "HTTPReceiverDeferredRequestError",
    "ReceiverAuthenticityError",
    "ReceiverInconsistentStateError",
    "ReceiverMultipleAckError",
]
