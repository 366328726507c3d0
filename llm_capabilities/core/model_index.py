"""Remote capability index sourced from the OpenRouter models listing."""

import os
import time
from typing import Any, Dict, Optional

import httpx

from ..config.constants import (
    DEFAULT_INDEX_PATH,
    DEFAULT_INDEX_TTL,
    DEFAULT_REQUEST_TIMEOUT,
    OPENROUTER_MODELS_URL,
)
from ..models.capabilities import Capability
from ..observability.logging import CapabilityLogger
from .storage import read_json_locked, write_json_locked

logger = CapabilityLogger("index")

ModelCapabilityMap = Dict[str, Dict[Capability, bool]]

# OpenRouter parameter names differ from ours:
#   "structured_outputs" (plural) -> structured_output (singular)
#   "tools" -> function_calling
#   "response_format" -> json_mode
PARAMETER_MAPPING: Dict[str, Capability] = {
    "structured_outputs": Capability.STRUCTURED_OUTPUT,
    "tools": Capability.FUNCTION_CALLING,
    "reasoning": Capability.REASONING,
    "response_format": Capability.JSON_MODE,
}


class RemoteCapabilityIndex:
    """
    Model -> capability flags, refreshed from a remote listing on a TTL.

    Staleness is evaluated once, on the first lookup. After that the in-memory
    map is reused for the life of the instance.
    """

    def __init__(
        self,
        path: str = DEFAULT_INDEX_PATH,
        ttl: int = DEFAULT_INDEX_TTL,
        url: str = OPENROUTER_MODELS_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        self.path = str(path)
        self.ttl = ttl
        self.url = url
        self.timeout = timeout
        self._http_client = http_client
        self._index: Optional[ModelCapabilityMap] = None

    def lookup(self, model: str, capability: Capability) -> Optional[bool]:
        """Return True/False if the index knows, None if it has no opinion."""
        index = self._load()
        model_caps = index.get(model)
        if not model_caps:
            return None
        return model_caps.get(Capability(capability))

    def _load(self) -> ModelCapabilityMap:
        if self._index is not None:
            return self._index

        if os.path.exists(self.path) and not self._is_stale():
            self._index = self._load_from_disk()
            if self._index is not None:
                return self._index

        self._index = self._fetch_and_cache()
        return self._index

    def _is_stale(self) -> bool:
        try:
            mtime = os.path.getmtime(self.path)
        except OSError:
            return True
        return (time.time() - mtime) > self.ttl

    def _load_from_disk(self) -> Optional[ModelCapabilityMap]:
        try:
            raw = read_json_locked(self.path)
        except (OSError, ValueError) as e:
            logger.warning("Index file unreadable, refetching", path=self.path, error_msg=str(e))
            return None

        if not isinstance(raw, dict):
            logger.warning("Index file is not a JSON object, refetching", path=self.path)
            return None

        logger.debug("Loaded index from disk", path=self.path, models=len(raw))
        return deserialize(raw)

    def _fetch_and_cache(self) -> ModelCapabilityMap:
        """Fetch once; any failure leaves the tier empty for this instance."""
        try:
            with logger.track("fetch", recoverable=True, url=self.url) as result:
                payload = self._fetch()
                index = self.normalize(payload)
                result["models"] = len(index)
        except Exception:
            # Logged by track(); the tier simply has no opinion
            return {}

        try:
            write_json_locked(self.path, serialize(index))
        except OSError as e:
            logger.warning("Failed to persist index", path=self.path, error_msg=str(e))

        return index

    def _fetch(self) -> Any:
        if self._http_client is not None:
            response = self._http_client.get(self.url, timeout=self.timeout)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(self.url)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def normalize(payload: Any) -> ModelCapabilityMap:
        """
        Convert an OpenRouter ``/models`` body into a ModelCapabilityMap.

        Malformed entries are skipped. Models without any mapped capability are
        left out entirely.
        """
        result: ModelCapabilityMap = {}
        if not isinstance(payload, dict):
            return result

        models = payload.get("data")
        if not isinstance(models, list):
            return result

        for model_entry in models:
            if not isinstance(model_entry, dict):
                continue

            model_id = model_entry.get("id")
            if not isinstance(model_id, str):
                continue

            caps = map_capabilities(model_entry)
            if caps:
                result[model_id] = caps

        return result


def map_capabilities(model_entry: Dict[str, Any]) -> Dict[Capability, bool]:
    caps: Dict[Capability, bool] = {}

    params = model_entry.get("supported_parameters")
    if isinstance(params, list):
        for param in params:
            if not isinstance(param, str):
                continue
            cap = PARAMETER_MAPPING.get(param)
            if cap is not None:
                caps[cap] = True

    arch = model_entry.get("architecture")
    if isinstance(arch, dict):
        input_mods = arch.get("input_modalities")
        if isinstance(input_mods, list) and "image" in input_mods:
            caps[Capability.VISION] = True

        output_mods = arch.get("output_modalities")
        if isinstance(output_mods, list) and "image" in output_mods:
            caps[Capability.IMAGE_GENERATION] = True

    return caps


def serialize(index: ModelCapabilityMap) -> Dict[str, Dict[str, bool]]:
    return {
        model_id: {cap.value: value for cap, value in caps.items()}
        for model_id, caps in index.items()
    }


def deserialize(raw: Dict[str, Any]) -> ModelCapabilityMap:
    """Rebuild the index from disk, dropping unknown names and non-boolean values."""
    result: ModelCapabilityMap = {}
    for model_id, caps in raw.items():
        if not isinstance(caps, dict):
            continue

        parsed: Dict[Capability, bool] = {}
        for name, value in caps.items():
            if not isinstance(value, bool):
                continue
            try:
                parsed[Capability(name)] = value
            except ValueError:
                continue
        result[model_id] = parsed
    return result
