"""Models and helpers for Kubernetes posture scan statuses, exceptions, attack tracks and objects."""

__version__ = "0.1.0"