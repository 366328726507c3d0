"""Stored cache entry shapes."""

import time
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError


class CacheEntry(BaseModel):
    """A single empirical observation."""
    model_config = ConfigDict(frozen=True)

    supported: StrictBool = Field(..., description="Whether the capability was observed to work")
    recorded_at: Optional[int] = Field(None, description="Unix seconds when the observation was recorded")

    def is_expired(self, max_age: Optional[int], now: Optional[int] = None) -> bool:
        if max_age is None or self.recorded_at is None:
            return False
        if now is None:
            now = int(time.time())
        return now - self.recorded_at > max_age

    def to_json(self) -> dict:
        return {"supported": self.supported, "recorded_at": self.recorded_at}


def decode_entry(raw: Any, now: Optional[int] = None) -> Optional[CacheEntry]:
    """
    Decode a stored value into a CacheEntry.

    Structured objects are tried first; a bare boolean is the legacy format and
    is upgraded with ``recorded_at`` set to now. Anything else is unreadable.
    """
    if isinstance(raw, dict):
        try:
            return CacheEntry.model_validate(raw)
        except ValidationError:
            return None
    if isinstance(raw, bool):
        return CacheEntry(
            supported=raw,
            recorded_at=int(time.time()) if now is None else now,
        )
    return None
