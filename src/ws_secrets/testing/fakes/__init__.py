"""Testing fakes – in-memory doubles for the namespace ports."""
from ws_secrets.testing.fakes.namespace import FakeNamespace, InMemorySecrets

__all__ = ["FakeNamespace", "InMemorySecrets"]
