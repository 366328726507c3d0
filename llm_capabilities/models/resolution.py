"""Result of a tiered capability resolution."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .capabilities import Capability


class ResolutionTier(str, Enum):
    """Which source produced the answer."""
    CACHE = "cache"
    INDEX = "index"
    REGISTRY = "registry"
    HEURISTIC = "heuristic"


class Resolution(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str = Field(..., description="Model identifier that was resolved")
    capability: Capability
    supported: bool
    tier: ResolutionTier
