"""Observability – structured logging helpers."""
from mp_numbering.observability.logging.factory import JsonLoggerFactory
from mp_numbering.observability.logging.processors import error_fields, get_logger

__all__ = ["JsonLoggerFactory", "error_fields", "get_logger"]
