"""Application receivers – acknowledgement, verification, routing, lifecycle."""
from bolt_errors.application.receivers.ack import Ack
from bolt_errors.application.receivers.lifecycle import ReceiverLifecycle
from bolt_errors.application.receivers.routes import ReceiverRouter, RouteHandler, build_receiver_routes
from bolt_errors.application.receivers.verification import (
    DEFAULT_MAX_AGE_SECONDS,
    RequestSigner,
    SignatureVerifier,
    verify_request_signature,
)

__all__ = [
    "DEFAULT_MAX_AGE_SECONDS",
    "Ack",
    "ReceiverLifecycle",
    "ReceiverRouter",
    "RequestSigner",
    "RouteHandler",
    "SignatureVerifier",
    "build_receiver_routes",
    "verify_request_signature",
]
