"""Observability – logging."""
from ws_secrets.observability.logging import SensitiveFieldsFilter, configure_logging, get_logger

__all__ = ["SensitiveFieldsFilter", "configure_logging", "get_logger"]
