"""Configuration value object for capability resolution."""

import os
from typing import Any, Dict, Mapping, Optional, Set

from pydantic import BaseModel, Field, field_validator

from ..models.capabilities import Capability, coerce_capability
from .constants import (
    CACHE_PATH_ENV_VAR,
    DEFAULT_CACHE_PATH,
    DEFAULT_INDEX_PATH,
    DEFAULT_INDEX_TTL,
    DEFAULT_MAX_AGE,
    DEFAULT_PROVIDER_CAPABILITIES,
    DEFAULT_REQUEST_TIMEOUT,
    INDEX_PATH_ENV_VAR,
    INDEX_TTL_ENV_VAR,
    INDEX_URL_ENV_VAR,
    MAX_AGE_ENV_VAR,
    OPENROUTER_MODELS_URL,
    REGISTRY_ENABLED_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
)

_NULL_VALUES = {"", "none", "null"}


def default_provider_capabilities() -> Dict[Capability, Set[str]]:
    """Return a fresh copy of the built-in provider heuristic table."""
    return {
        Capability(name): set(providers)
        for name, providers in DEFAULT_PROVIDER_CAPABILITIES.items()
    }


def copy_provider_capabilities(table: Mapping[Any, Any]) -> Dict[Capability, Set[str]]:
    """Copy a provider table so later mutation of the source has no effect."""
    return {coerce_capability(cap): set(providers) for cap, providers in table.items()}


class CapabilitiesConfig(BaseModel):
    """
    Tunable settings for the cache, the remote index and the heuristic tier.

    Instances never share the provider table: every instance builds its own,
    and dependents receive copies via ``copy_provider_capabilities``.
    """

    cache_path: str = Field(DEFAULT_CACHE_PATH, description="Empirical cache JSON file")
    index_path: str = Field(DEFAULT_INDEX_PATH, description="Remote index JSON file")
    index_ttl: int = Field(DEFAULT_INDEX_TTL, ge=0, description="Seconds before the index file is refetched")
    max_age: Optional[int] = Field(DEFAULT_MAX_AGE, ge=0, description="Cache entry lifetime; None disables expiry")
    provider_capabilities: Dict[Capability, Set[str]] = Field(
        default_factory=default_provider_capabilities,
        description="Capability -> providers assumed to support it",
    )
    index_url: str = Field(OPENROUTER_MODELS_URL, description="Remote capability source")
    request_timeout: float = Field(DEFAULT_REQUEST_TIMEOUT, gt=0, description="Timeout for the index fetch")
    registry_enabled: Optional[bool] = Field(
        None,
        description="Force the third-party registry tier on/off; None auto-detects",
    )

    @field_validator("provider_capabilities", mode="before")
    @classmethod
    def _copy_table(cls, v):
        if isinstance(v, Mapping):
            return copy_provider_capabilities(v)
        return v

    def copy_with(self, **overrides: Any) -> "CapabilitiesConfig":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(overrides)
        return CapabilitiesConfig(**data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CapabilitiesConfig":
        """
        Build a configuration from environment variables.

        Unset variables keep their defaults. ``LLM_CAPABILITIES_MAX_AGE=none``
        disables cache expiry.
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}

        if env.get(CACHE_PATH_ENV_VAR):
            values["cache_path"] = env[CACHE_PATH_ENV_VAR]
        if env.get(INDEX_PATH_ENV_VAR):
            values["index_path"] = env[INDEX_PATH_ENV_VAR]
        if env.get(INDEX_TTL_ENV_VAR):
            values["index_ttl"] = env[INDEX_TTL_ENV_VAR]
        if MAX_AGE_ENV_VAR in env:
            raw = env[MAX_AGE_ENV_VAR].strip()
            values["max_age"] = None if raw.lower() in _NULL_VALUES else raw
        if env.get(INDEX_URL_ENV_VAR):
            values["index_url"] = env[INDEX_URL_ENV_VAR]
        if env.get(REQUEST_TIMEOUT_ENV_VAR):
            values["request_timeout"] = env[REQUEST_TIMEOUT_ENV_VAR]
        if REGISTRY_ENABLED_ENV_VAR in env:
            raw = env[REGISTRY_ENABLED_ENV_VAR].strip()
            values["registry_enabled"] = None if raw.lower() in _NULL_VALUES else raw

        return cls(**values)
