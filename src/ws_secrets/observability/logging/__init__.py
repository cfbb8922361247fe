"""Observability – structured logging helpers."""
from ws_secrets.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from ws_secrets.observability.logging.factory import configure_logging
from ws_secrets.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "SensitiveFieldsFilter",
    "configure_logging",
    "get_logger",
]
