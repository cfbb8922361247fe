"""Testing – helpers for exercising provisioning without a cluster."""
from ws_secrets.testing.fakes import FakeNamespace, InMemorySecrets

__all__ = ["FakeNamespace", "InMemorySecrets"]
