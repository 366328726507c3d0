"""Data models for capability resolution."""

from .capabilities import Capability, KNOWN_CAPABILITIES, coerce_capability
from .entries import CacheEntry, decode_entry
from .resolution import Resolution, ResolutionTier

__all__ = [
    "Capability",
    "KNOWN_CAPABILITIES",
    "coerce_capability",
    "CacheEntry",
    "decode_entry",
    "Resolution",
    "ResolutionTier",
]
