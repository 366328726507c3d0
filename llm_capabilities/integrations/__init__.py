"""Optional integrations with external model registries."""

from .registry import (
    LiteLLMRegistry,
    ModelRegistry,
    ThirdPartyRegistryAdapter,
    litellm_loaded,
)

__all__ = [
    "LiteLLMRegistry",
    "ModelRegistry",
    "ThirdPartyRegistryAdapter",
    "litellm_loaded",
]
