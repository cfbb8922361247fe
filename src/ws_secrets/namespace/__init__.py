"""Namespace ports."""
from ws_secrets.namespace.port import Environment, Namespace, SecretAccessor

__all__ = ["Environment", "Namespace", "SecretAccessor"]
