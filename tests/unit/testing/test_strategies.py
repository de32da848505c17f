"""Unit tests for the hypothesis strategies shipped for downstream suites."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from hypothesis import given, settings

from bolt_errors.kernel.errors import BoltError, ErrorCode
from bolt_errors.testing import coded_error_strategy, foreign_error_strategy


class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self) -> None:
        from bolt_errors.testing.strategies import _require_hypothesis

        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="hypothesis"):
                _require_hypothesis()


class TestStrategies:
    @settings(max_examples=200)
    @given(coded_error_strategy())
    def test_coded_errors_carry_registered_codes(self, err: BoltError) -> None:
        assert isinstance(err, BoltError)
        assert err.code in set(ErrorCode)

    @given(foreign_error_strategy())
    def test_foreign_errors_have_no_code(self, err: Exception) -> None:
        assert isinstance(err, Exception)
        assert not hasattr(err, "code")
