"""Logging helpers for capability resolution."""

from .logging import CapabilityLogger

__all__ = ["CapabilityLogger"]
