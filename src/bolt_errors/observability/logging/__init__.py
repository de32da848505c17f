"""Observability – structured logging helpers."""
from bolt_errors.observability.logging.factory import JsonLoggerFactory
from bolt_errors.observability.logging.processors import CodedErrorProcessor, get_logger
from bolt_errors.observability.logging.protocol import Logger

__all__ = ["CodedErrorProcessor", "JsonLoggerFactory", "Logger", "get_logger"]
