"""Main client interface for capability resolution."""

from typing import Any, Optional

import httpx

from ..config.settings import CapabilitiesConfig
from ..core.cache import EmpiricalCache
from ..core.detector import Detector
from ..core.keys import Context
from ..core.model_index import RemoteCapabilityIndex
from ..integrations.registry import ModelRegistry, ThirdPartyRegistryAdapter
from ..models.capabilities import coerce_capability
from ..models.resolution import Resolution


class CapabilitiesClient:
    """
    Holds one configuration and the stores derived from it.

    Construct once at startup and pass it to whatever needs capability
    resolution. Stores are built lazily and dropped whenever the configuration
    is replaced.
    """

    def __init__(
        self,
        config: Optional[CapabilitiesConfig] = None,
        registry: Optional[ModelRegistry] = None,
        http_client: Optional[httpx.Client] = None,
        use_index: bool = True,
    ):
        """
        Initialize the client.

        Args:
            config: Settings to use; defaults to ``CapabilitiesConfig()``
            registry: Optional in-process model registry for the third tier
            http_client: Optional httpx client used for the index fetch
            use_index: Set to False to skip the remote index tier entirely
        """
        self._config = (config or CapabilitiesConfig()).model_copy(deep=True)
        self._registry = registry
        self._http_client = http_client
        self._use_index = use_index
        self._invalidate()

    @property
    def config(self) -> CapabilitiesConfig:
        """A copy of the active configuration."""
        return self._config.model_copy(deep=True)

    def configure(self, config: Optional[CapabilitiesConfig] = None, **overrides: Any) -> CapabilitiesConfig:
        """
        Replace the configuration and drop every derived store.

        Args:
            config: New configuration; defaults to the current one
            **overrides: Fields to change on top of ``config``

        Returns:
            The new active configuration (a copy)
        """
        base = config if config is not None else self._config
        if overrides:
            self._config = base.copy_with(**overrides)
        else:
            self._config = base.model_copy(deep=True)
        self._invalidate()
        return self.config

    def reset(self) -> None:
        """Restore default configuration and drop every derived store."""
        self._config = CapabilitiesConfig()
        self._invalidate()

    def supports(self, model: str, capability: Any, context: Context = None) -> bool:
        return self.detector.supports(model, capability, context=context)

    def resolve(self, model: str, capability: Any, context: Context = None) -> Resolution:
        return self.detector.resolve(model, capability, context=context)

    def record(self, model: str, capability: Any, supported: bool, context: Context = None) -> None:
        """Record an observation; unknown capabilities are rejected before any I/O."""
        self.cache.record(model, coerce_capability(capability), supported, context=context)

    def lookup(self, model: str, capability: Any, context: Context = None) -> Optional[bool]:
        return self.cache.lookup(model, coerce_capability(capability), context=context)

    def clear(self) -> None:
        self.cache.clear()

    def size(self) -> int:
        return self.cache.size()

    @property
    def cache(self) -> EmpiricalCache:
        if self._cache is None:
            self._cache = EmpiricalCache(
                path=self._config.cache_path,
                max_age=self._config.max_age,
            )
        return self._cache

    @property
    def model_index(self) -> Optional[RemoteCapabilityIndex]:
        if not self._use_index:
            return None
        if self._model_index is None:
            self._model_index = RemoteCapabilityIndex(
                path=self._config.index_path,
                ttl=self._config.index_ttl,
                url=self._config.index_url,
                timeout=self._config.request_timeout,
                http_client=self._http_client,
            )
        return self._model_index

    @property
    def detector(self) -> Detector:
        if self._detector is None:
            self._detector = Detector(
                cache=self.cache,
                provider_capabilities=self._config.provider_capabilities,
                model_index=self.model_index,
                registry_adapter=ThirdPartyRegistryAdapter(
                    registry=self._registry,
                    enabled=self._config.registry_enabled,
                ),
            )
        return self._detector

    def _invalidate(self) -> None:
        self._cache: Optional[EmpiricalCache] = None
        self._model_index: Optional[RemoteCapabilityIndex] = None
        self._detector: Optional[Detector] = None
