"""Namespace ports – the collaborators a provisioning pass consumes."""
from __future__ import annotations

import abc
from typing import Mapping, Protocol

from ws_secrets.model import LabelSelector, PodData, Secret


class SecretAccessor(abc.ABC):
    """Port: list the secrets of one namespace by label selector."""

    @abc.abstractmethod
    def get(self, selector: LabelSelector) -> list[Secret]: ...


class Namespace(abc.ABC):
    """Port: the workspace namespace the environment is deployed into."""

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @abc.abstractmethod
    def secrets(self) -> SecretAccessor: ...


class Environment(Protocol):
    """Anything exposing pod descriptors keyed by pod name."""

    def get_pods_data(self) -> Mapping[str, PodData]: ...


__all__ = ["Environment", "Namespace", "SecretAccessor"]
