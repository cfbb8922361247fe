"""Model – secrets, label selectors and the workspace environment."""
from ws_secrets.model.environment import KubernetesEnvironment, PodData, PodRole
from ws_secrets.model.labels import LabelSelector
from ws_secrets.model.secret import Secret

__all__ = ["KubernetesEnvironment", "LabelSelector", "PodData", "PodRole", "Secret"]
