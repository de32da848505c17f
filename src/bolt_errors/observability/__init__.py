"""Observability – logging."""

from bolt_errors.observability.logging import CodedErrorProcessor, JsonLoggerFactory, Logger, get_logger

__all__ = ["CodedErrorProcessor", "JsonLoggerFactory", "Logger", "get_logger"]
