"""Testing – property-based strategies for downstream test suites."""
from bolt_errors.testing.strategies import coded_error_strategy, foreign_error_strategy

__all__ = ["coded_error_strategy", "foreign_error_strategy"]
