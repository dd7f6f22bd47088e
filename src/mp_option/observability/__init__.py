"""Observability – structured logging helpers."""
from mp_option.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
