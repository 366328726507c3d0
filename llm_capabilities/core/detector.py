"""Tiered capability resolution."""

from typing import Any, Dict, Mapping, Optional, Set

from ..config.settings import copy_provider_capabilities, default_provider_capabilities
from ..integrations.registry import ThirdPartyRegistryAdapter
from ..models.capabilities import Capability, KNOWN_CAPABILITIES, coerce_capability
from ..models.resolution import Resolution, ResolutionTier
from ..observability.logging import CapabilityLogger
from .cache import EmpiricalCache
from .keys import Context
from .model_index import RemoteCapabilityIndex

logger = CapabilityLogger("detector")


class Detector:
    """
    Answers "does model M support capability C?" from four ordered tiers.

    1. Empirical cache (context-sensitive, most authoritative)
    2. Remote capability index
    3. Third-party model registry
    4. Provider heuristic table (always answers)

    Context only scopes the cache tier; the other tiers ignore it.
    """

    KNOWN_CAPABILITIES = KNOWN_CAPABILITIES

    def __init__(
        self,
        cache: EmpiricalCache,
        provider_capabilities: Optional[Mapping[Any, Any]] = None,
        model_index: Optional[RemoteCapabilityIndex] = None,
        registry_adapter: Optional[ThirdPartyRegistryAdapter] = None,
        registry_enabled: Optional[bool] = None,
    ):
        self.cache = cache
        self.model_index = model_index
        if provider_capabilities is None:
            self.provider_capabilities: Dict[Capability, Set[str]] = default_provider_capabilities()
        else:
            self.provider_capabilities = copy_provider_capabilities(provider_capabilities)
        if registry_adapter is None:
            registry_adapter = ThirdPartyRegistryAdapter(enabled=registry_enabled)
        self.registry_adapter = registry_adapter

    def supports(self, model: str, capability: Any, context: Context = None) -> bool:
        """
        Resolve whether ``model`` supports ``capability``.

        Raises:
            UnknownCapabilityError: If the capability is not in the vocabulary
        """
        return self.resolve(model, capability, context=context).supported

    def resolve(self, model: str, capability: Any, context: Context = None) -> Resolution:
        """Like ``supports`` but also reports which tier answered."""
        cap = coerce_capability(capability)

        supported, tier = self._resolve(model, cap, context)
        logger.debug("Resolved capability", model=model, capability=cap,
                     supported=supported, tier=tier.value)
        return Resolution(model=model, capability=cap, supported=supported, tier=tier)

    def _resolve(self, model: str, capability: Capability, context: Context):
        cached = self.cache.lookup(model, capability, context=context)
        if cached is not None:
            return cached, ResolutionTier.CACHE

        if self.model_index is not None:
            indexed = self.model_index.lookup(model, capability)
            if indexed is not None:
                return indexed, ResolutionTier.INDEX

        registered = self.registry_adapter.query(model, capability)
        if registered is not None:
            return registered, ResolutionTier.REGISTRY

        return self.provider_supports(model, capability), ResolutionTier.HEURISTIC

    def provider_supports(self, model: str, capability: Any) -> bool:
        """Heuristic: is the model's provider listed for this capability?"""
        if "/" not in model:
            return False
        provider = model.split("/", 1)[0]
        if not provider:
            return False

        try:
            cap = coerce_capability(capability)
        except ValueError:
            return False

        providers = self.provider_capabilities.get(cap)
        if not providers:
            return False
        return provider in providers
