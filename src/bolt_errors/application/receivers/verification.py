"""Receivers – request signature verification (HMAC-SHA256, ``v0`` scheme)."""
from __future__ import annotations

import hashlib
import hmac
import time

from bolt_errors.config.settings import ErrorHandlingSettings
from bolt_errors.kernel.errors import ReceiverAuthenticityError

__all__ = ["DEFAULT_MAX_AGE_SECONDS", "RequestSigner", "SignatureVerifier", "verify_request_signature"]

DEFAULT_MAX_AGE_SECONDS = 300


class RequestSigner:
    """Signs request bodies the way the platform does: ``v0=<hexdigest>``."""

    VERSION = "v0"

    @classmethod
    def sign(cls, signing_secret: str, timestamp: int | str, body: bytes | str) -> str:
        raw = body.encode() if isinstance(body, str) else body
        base = f"{cls.VERSION}:{timestamp}:".encode() + raw
        mac = hmac.new(signing_secret.encode(), base, hashlib.sha256)
        return f"{cls.VERSION}={mac.hexdigest()}"


def verify_request_signature(
    signing_secret: str,
    body: bytes | str,
    timestamp: str | None,
    signature: str | None,
    *,
    now: float | None = None,
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
) -> None:
    """Raise :class:`ReceiverAuthenticityError` unless the request is authentic.

    Checks, in order: both headers present, timestamp is an integer, the
    timestamp is no older than *max_age_seconds*, and the signature over the
    raw timestamp header matches using a constant-time comparison.
    """
    if not timestamp or not signature:
        raise ReceiverAuthenticityError("Request is missing required signature headers")
    try:
        ts = int(timestamp)
    except ValueError as exc:
        raise ReceiverAuthenticityError("Request timestamp header is not an integer") from exc

    current = time.time() if now is None else now
    if ts < int(current) - max_age_seconds:
        raise ReceiverAuthenticityError(
            f"Request timestamp is older than {max_age_seconds} seconds"
        )

    expected = RequestSigner.sign(signing_secret, timestamp, body)
    if not hmac.compare_digest(expected.encode(), signature.encode()):
        raise ReceiverAuthenticityError("Request signature does not match")


class SignatureVerifier:
    """Verifies requests with one signing secret and the configured max age."""

    def __init__(self, signing_secret: str, settings: ErrorHandlingSettings | None = None) -> None:
        self._signing_secret = signing_secret
        self._settings = settings or ErrorHandlingSettings()

    @property
    def max_age_seconds(self) -> int:
        return self._settings.signature_max_age_seconds

    def verify(
        self,
        body: bytes | str,
        timestamp: str | None,
        signature: str | None,
        *,
        now: float | None = None,
    ) -> None:
        verify_request_signature(
            self._signing_secret,
            body,
            timestamp,
            signature,
            now=now,
            max_age_seconds=self.max_age_seconds,
        )
