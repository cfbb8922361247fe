"""Model – LabelSelector value object."""
from __future__ import annotations

import dataclasses
from typing import Iterable, Mapping

from ws_secrets.kernel.errors import InvalidLabelSelectorError


@dataclasses.dataclass(frozen=True)
class LabelSelector:
    """Equality-based label requirements (``matchLabels``).

    ``match_labels`` keeps declaration order so that :meth:`to_query` is
    stable.
    """

    match_labels: tuple[tuple[str, str], ...] = ()

    @classmethod
    def parse(cls, entries: Iterable[str]) -> "LabelSelector":
        """Build a selector from ``key:value`` (or ``key=value``) strings.

        Blank entries are skipped. A later entry for the same key replaces
        the earlier value in place.
        """
        labels: dict[str, str] = {}
        for entry in entries:
            raw = entry.strip()
            if not raw:
                continue
            separator = ":" if ":" in raw else "="
            key, found, value = raw.partition(separator)
            if not found or not key.strip():
                raise InvalidLabelSelectorError(entry)
            labels[key.strip()] = value.strip()
        return cls(match_labels=tuple(labels.items()))

    @classmethod
    def of(cls, labels: Mapping[str, str]) -> "LabelSelector":
        return cls(match_labels=tuple(labels.items()))

    def as_dict(self) -> dict[str, str]:
        return dict(self.match_labels)

    def matches(self, labels: Mapping[str, str]) -> bool:
        """Return ``True`` when every requirement is present in *labels*."""
        return all(labels.get(key) == value for key, value in self.match_labels)

    def to_query(self) -> str:
        """Render as a Kubernetes ``labelSelector`` query string."""
        return ",".join(f"{key}={value}" for key, value in self.match_labels)

    def __str__(self) -> str:
        return self.to_query()


__all__ = ["LabelSelector"]
