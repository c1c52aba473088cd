"""Ports layer - Interfaces the dispatch machinery depends on."""

from .listener_registry import ListenerRegistryPort
from .logger import LoggerPort
from .metrics import MetricsPort

__all__ = [
    "ListenerRegistryPort",
    "LoggerPort",
    "MetricsPort",
]
