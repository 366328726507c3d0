"""
LLM Capabilities - decide whether a model supports a feature.

Answers come from four tiers, in priority order:
- Empirical observations recorded on disk
- The OpenRouter model index, refreshed daily
- An optional in-process model registry (LiteLLM by default)
- A static provider heuristic table

Usage:
    client = CapabilitiesClient()
    client.supports("openai/o4-mini", "structured_output")
"""

__version__ = "0.1.0"

from .api.client import CapabilitiesClient
from .config import CapabilitiesConfig
from .core import Detector, EmpiricalCache, RemoteCapabilityIndex
from .errors import CapabilitiesError, StorageError, UnknownCapabilityError
from .integrations import LiteLLMRegistry, ModelRegistry, ThirdPartyRegistryAdapter
from .models import Capability, CacheEntry, Resolution, ResolutionTier

__all__ = [
    # Main client
    "CapabilitiesClient",
    "CapabilitiesConfig",

    # Core
    "Detector",
    "EmpiricalCache",
    "RemoteCapabilityIndex",
    "ThirdPartyRegistryAdapter",
    "ModelRegistry",
    "LiteLLMRegistry",

    # Models
    "Capability",
    "CacheEntry",
    "Resolution",
    "ResolutionTier",

    # Errors
    "CapabilitiesError",
    "UnknownCapabilityError",
    "StorageError",
]
