"""
Third-party model registry tier.

A registry is anything implementing ``ModelRegistry.supports``. The host
application can pass its own; when none is given and the host has already
imported LiteLLM, LiteLLM's bundled model metadata is used. LiteLLM is never
imported just to answer a capability question unless ``enabled=True``.
"""

import importlib
import sys
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ..models.capabilities import Capability
from ..observability.logging import CapabilityLogger

logger = CapabilityLogger("registry")


@runtime_checkable
class ModelRegistry(Protocol):
    """In-process source of per-model capability flags."""

    def supports(self, model: str, capability: Capability) -> Optional[bool]:
        """Return True/False when the registry knows, None otherwise."""
        ...


class LiteLLMRegistry:
    """ModelRegistry backed by ``litellm.get_model_info``."""

    FLAG_MAPPING: Dict[Capability, str] = {
        Capability.STRUCTURED_OUTPUT: "supports_response_schema",
        Capability.FUNCTION_CALLING: "supports_function_calling",
        Capability.VISION: "supports_vision",
        Capability.REASONING: "supports_reasoning",
        Capability.CACHING: "supports_prompt_caching",
        Capability.STREAMING: "supports_native_streaming",
        Capability.SPEECH_GENERATION: "supports_audio_output",
    }

    def __init__(self, module: Any = None):
        self._litellm = module

    @property
    def litellm(self) -> Any:
        if self._litellm is None:
            self._litellm = importlib.import_module("litellm")
        return self._litellm

    def supports(self, model: str, capability: Capability) -> Optional[bool]:
        flag = self.FLAG_MAPPING.get(capability)
        if flag is None:
            return None

        info = self.litellm.get_model_info(model)
        if not info:
            return None

        value = info.get(flag)
        return value if isinstance(value, bool) else None


def litellm_loaded() -> bool:
    """True when the host process has already imported litellm."""
    return "litellm" in sys.modules


class ThirdPartyRegistryAdapter:
    """
    Best-effort query into an optional model registry.

    Availability is decided on first use and then cached. Every failure in the
    probe reads as "no opinion"; this tier never raises.
    """

    def __init__(self, registry: Optional[ModelRegistry] = None, enabled: Optional[bool] = None):
        self._registry = registry
        self._enabled = enabled

    @property
    def available(self) -> bool:
        if self._enabled is None:
            self._enabled = self._registry is not None or litellm_loaded()
            logger.debug("Registry availability detected", available=self._enabled)
        return self._enabled

    def query(self, model: str, capability: Capability) -> Optional[bool]:
        if not self.available:
            return None

        try:
            if self._registry is None:
                self._registry = LiteLLMRegistry()
            result = self._registry.supports(model, capability)
        except Exception as e:
            logger.debug("Registry probe failed", model=model, capability=capability,
                         error_type=type(e).__name__, error_msg=str(e))
            return None

        return result if isinstance(result, bool) else None
