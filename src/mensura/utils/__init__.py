"""Shared utilities: structured logging."""

from .logging import JsonLogFormatter, configure_json_logger, flush_handlers, generate_trace_id, log_event

__all__ = [
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
]
