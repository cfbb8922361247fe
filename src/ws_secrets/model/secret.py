"""Model – Secret snapshot."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping


def _frozen(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclasses.dataclass(frozen=True)
class Secret:
    """Read-only view of a namespace secret for one provisioning pass.

    ``data`` keeps the iteration order of the source object; payloads are
    opaque and never appear in ``repr``.
    """

    name: str
    data: Mapping[str, str] = dataclasses.field(default_factory=dict, repr=False)
    annotations: Mapping[str, str] = dataclasses.field(default_factory=dict)
    labels: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _frozen(self.data))
        object.__setattr__(self, "annotations", _frozen(self.annotations))
        object.__setattr__(self, "labels", _frozen(self.labels))

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self.data)

    @classmethod
    def from_k8s(cls, obj: Any) -> "Secret":
        """Snapshot a ``kubernetes.client.V1Secret``."""
        metadata = obj.metadata
        return cls(
            name=metadata.name,
            data=obj.data,
            annotations=metadata.annotations,
            labels=metadata.labels,
        )


__all__ = ["Secret"]
