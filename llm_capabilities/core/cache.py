"""Empirical capability cache backed by a JSON file."""

import json
import time
from typing import Any, Dict, Optional

from ..config.constants import DEFAULT_CACHE_PATH, DEFAULT_MAX_AGE
from ..errors import StorageError
from ..models.entries import CacheEntry, decode_entry
from ..observability.logging import CapabilityLogger
from .keys import Context, cache_key
from .storage import read_json_locked, write_json_locked

logger = CapabilityLogger("cache")


class EmpiricalCache:
    """
    Observed (model, capability, context) -> supported answers.

    The file is read once, on first use; after that the in-memory mapping is
    authoritative for this instance. Every write persists the full mapping.
    """

    def __init__(self, path: str = DEFAULT_CACHE_PATH, max_age: Optional[int] = DEFAULT_MAX_AGE):
        self.path = str(path)
        self.max_age = max_age
        self._entries: Optional[Dict[str, CacheEntry]] = None

    def cache_key(self, model: str, capability: Any, context: Context = None) -> str:
        return cache_key(model, capability, context)

    def lookup(self, model: str, capability: Any, context: Context = None) -> Optional[bool]:
        """
        Return the recorded answer, or None when unknown or expired.

        Args:
            model: Model identifier (e.g., "openai/o4-mini")
            capability: Capability member or name
            context: Optional modifiers scoping the observation

        Returns:
            The recorded boolean, or None
        """
        entries = self._load()
        entry = entries.get(self.cache_key(model, capability, context))
        if entry is None:
            return None

        if entry.is_expired(self.max_age, now=int(time.time())):
            logger.debug("Entry expired", model=model, capability=capability,
                         recorded_at=entry.recorded_at, max_age=self.max_age)
            return None

        return entry.supported

    def record(self, model: str, capability: Any, supported: bool, context: Context = None) -> None:
        """Store an observation, replacing any earlier one, and persist."""
        entries = dict(self._load())
        key = self.cache_key(model, capability, context)
        entries[key] = CacheEntry(supported=bool(supported), recorded_at=int(time.time()))
        self._persist(entries)
        self._entries = entries
        logger.debug("Recorded observation", model=model, capability=capability,
                     supported=bool(supported), key=key)

    def clear(self) -> None:
        """Remove every observation; memory is only emptied once the file is."""
        self._persist({})
        self._entries = {}

    def size(self) -> int:
        return len(self._load())

    def __len__(self) -> int:
        return self.size()

    def _load(self) -> Dict[str, CacheEntry]:
        if self._entries is not None:
            return self._entries

        try:
            raw = read_json_locked(self.path)
        except FileNotFoundError:
            raw = {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Cache file is not valid JSON, starting empty",
                           path=self.path, error_msg=str(e))
            raw = {}
        except OSError as e:
            raise StorageError(f"Failed to read capability cache {self.path}: {e}", path=self.path) from e

        if not isinstance(raw, dict):
            logger.warning("Cache file is not a JSON object, starting empty", path=self.path)
            raw = {}

        now = int(time.time())
        entries: Dict[str, CacheEntry] = {}
        for key, value in raw.items():
            entry = decode_entry(value, now=now)
            if entry is None:
                logger.warning("Skipping unreadable cache entry", key=key)
                continue
            entries[str(key)] = entry
        self._entries = entries
        return self._entries

    def _persist(self, entries: Dict[str, CacheEntry]) -> None:
        data = {key: entry.to_json() for key, entry in entries.items()}
        try:
            write_json_locked(self.path, data)
        except OSError as e:
            raise StorageError(f"Failed to write capability cache {self.path}: {e}", path=self.path) from e

