"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from mp_numbering.kernel.errors import BaseError


def error_fields(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that flattens a ``BaseError`` bound as ``error=``.

    ``log.info("number.decompose_failed", error=exc)`` is rendered with
    ``error_code`` and the error's detail fields instead of its repr.
    """
    error = event_dict.get("error")
    if isinstance(error, BaseError):
        event_dict["error"] = error.message
        event_dict.setdefault("error_code", error.code)
        for key, value in error.detail.items():
            event_dict.setdefault(key, value)
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["error_fields", "get_logger"]
