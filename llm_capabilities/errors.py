"""Error types raised by the capability resolution core."""

from typing import Any, Optional


class CapabilitiesError(Exception):
    pass


class UnknownCapabilityError(CapabilitiesError, ValueError):
    """Raised when a capability is outside the known vocabulary."""

    def __init__(self, capability: Any):
        self.capability = capability
        super().__init__(f"Unknown capability: {capability!r}")


class StorageError(CapabilitiesError):
    """Raised when the cache file cannot be read or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
