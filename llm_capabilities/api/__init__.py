"""Public client API."""

from .client import CapabilitiesClient

__all__ = ["CapabilitiesClient"]
