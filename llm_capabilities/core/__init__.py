"""
Capability resolution core.

This layer handles:
- Empirical observation cache
- Remote capability index
- Cache key construction
- Tiered detection
"""

from .cache import EmpiricalCache
from .detector import Detector
from .keys import cache_key, stringify_context_value
from .model_index import ModelCapabilityMap, RemoteCapabilityIndex

__all__ = [
    "EmpiricalCache",
    "Detector",
    "RemoteCapabilityIndex",
    "ModelCapabilityMap",
    "cache_key",
    "stringify_context_value",
]
