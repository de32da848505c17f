"""Unit tests for listener dispatch and failure aggregation."""

from __future__ import annotations

import asyncio

import pytest

from bolt_errors.application import ListenerRegistry, raise_for_listener_failures
from bolt_errors.kernel.errors import ErrorCode, MultipleListenerError, as_coded_error


class TestRaiseForListenerFailures:
    def test_no_failures_returns(self) -> None:
        assert raise_for_listener_failures([]) is None

    def test_single_failure_is_raised_unchanged(self) -> None:
        err = ValueError("only one")
        with pytest.raises(ValueError) as info:
            raise_for_listener_failures([err])
        assert info.value is err

    def test_multiple_failures_are_aggregated(self) -> None:
        a, b, c = ValueError("a"), KeyError("b"), RuntimeError("c")
        with pytest.raises(MultipleListenerError) as info:
            raise_for_listener_failures([a, b, c])
        assert info.value.originals == (a, b, c)


class TestListenerRegistry:
    def test_dispatch_without_listeners_is_noop(self) -> None:
        asyncio.run(ListenerRegistry().dispatch("app_mention", {}))

    def test_all_listeners_receive_payload(self) -> None:
        seen: list[tuple[str, dict]] = []
        registry = ListenerRegistry()

        async def first(payload: dict) -> None:
            seen.append(("first", payload))

        def second(payload: dict) -> None:
            seen.append(("second", payload))

        registry.register("message", first)
        registry.register("message", second)
        asyncio.run(registry.dispatch("message", {"text": "hi"}))
        assert sorted(name for name, _ in seen) == ["first", "second"]
        assert all(p == {"text": "hi"} for _, p in seen)

    def test_listeners_are_scoped_by_event_type(self) -> None:
        registry = ListenerRegistry()
        registry.register("message", lambda p: None)
        assert len(registry.listeners_for("message")) == 1
        assert registry.listeners_for("reaction_added") == []

    def test_two_failures_become_multiple_listener_error(self) -> None:
        a, b = ValueError("A"), RuntimeError("B")
        registry = ListenerRegistry()

        async def fail_a(payload: object) -> None:
            await asyncio.sleep(0.01)
            raise a

        async def fail_b(payload: object) -> None:
            raise b

        registry.register("message", fail_a)
        registry.register("message", fail_b)
        with pytest.raises(MultipleListenerError) as info:
            asyncio.run(registry.dispatch("message", {}))

        coded = as_coded_error(info.value)
        assert coded.code == ErrorCode.MULTIPLE_LISTENER_ERROR
        assert len(coded.originals) == 2
        assert coded.originals[0] is a
        assert coded.originals[1] is b

    def test_one_failure_among_successes_is_raised_directly(self) -> None:
        boom = KeyError("missing")
        registry = ListenerRegistry()
        ran: list[str] = []

        def ok(payload: object) -> None:
            ran.append("ok")

        def bad(payload: object) -> None:
            raise boom

        registry.register("message", bad)
        registry.register("message", ok)
        with pytest.raises(KeyError) as info:
            asyncio.run(registry.dispatch("message", {}))
        assert info.value is boom
        assert ran == ["ok"]

    def test_dispatch_runs_listeners_registered_before_the_call(self) -> None:
        registry = ListenerRegistry()
        ran: list[str] = []

        def late(payload: object) -> None:
            ran.append("late")

        def registering(payload: object) -> None:
            ran.append("registering")
            registry.register("message", late)

        registry.register("message", registering)
        asyncio.run(registry.dispatch("message", {}))
        assert ran == ["registering"]
        assert len(registry.listeners_for("message")) == 2
