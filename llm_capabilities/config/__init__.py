"""Configuration module for capability resolution."""

from .settings import (
    CapabilitiesConfig,
    copy_provider_capabilities,
    default_provider_capabilities,
)

# Import all constants
from .constants import *

__all__ = [
    "CapabilitiesConfig",
    "copy_provider_capabilities",
    "default_provider_capabilities",
]
