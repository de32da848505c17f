"""Unit tests for the authorization boundary."""

from __future__ import annotations

import asyncio

import pytest
from structlog.testing import capture_logs

from bolt_errors.application import authorize
from bolt_errors.kernel.errors import AuthorizationError, ErrorCode


class TestAuthorize:
    def test_sync_result_is_returned(self) -> None:
        result = asyncio.run(authorize(lambda src: {"bot_token": "xoxb"}, {"team_id": "T1"}))
        assert result == {"bot_token": "xoxb"}

    def test_async_result_is_awaited(self) -> None:
        async def fn(source: dict) -> dict:
            return {"team": source["team_id"]}

        assert asyncio.run(authorize(fn, {"team_id": "T9"})) == {"team": "T9"}

    def test_failure_is_wrapped_with_original(self) -> None:
        cause = LookupError("no installation for T1")

        async def fn(source: dict) -> dict:
            raise cause

        with pytest.raises(AuthorizationError) as info:
            asyncio.run(authorize(fn, {"team_id": "T1"}))
        assert info.value.original is cause
        assert info.value.__cause__ is cause
        assert info.value.code is ErrorCode.AUTHORIZATION_ERROR

    def test_failure_is_logged_as_warning(self) -> None:
        def fn(source: dict) -> dict:
            raise RuntimeError("store offline")

        with capture_logs() as logs:
            with pytest.raises(AuthorizationError):
                asyncio.run(authorize(fn, {}))
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["event"] == "authorization_failed"
