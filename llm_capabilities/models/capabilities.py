"""Capability vocabulary."""

from enum import Enum
from typing import Any

from ..errors import UnknownCapabilityError


class Capability(str, Enum):
    """Known boolean model features."""
    STRUCTURED_OUTPUT = "structured_output"
    FUNCTION_CALLING = "function_calling"
    VISION = "vision"
    STREAMING = "streaming"
    JSON_MODE = "json_mode"
    REASONING = "reasoning"
    IMAGE_GENERATION = "image_generation"
    SPEECH_GENERATION = "speech_generation"
    TRANSCRIPTION = "transcription"
    TRANSLATION = "translation"
    CITATIONS = "citations"
    PREDICTED_OUTPUTS = "predicted_outputs"
    DISTILLATION = "distillation"
    FINE_TUNING = "fine_tuning"
    BATCH = "batch"
    REALTIME = "realtime"
    CACHING = "caching"
    MODERATION = "moderation"

    def __str__(self) -> str:
        return self.value


KNOWN_CAPABILITIES = frozenset(Capability)


def coerce_capability(value: Any) -> Capability:
    """
    Convert a capability name or member to a Capability.

    Args:
        value: A Capability member or its exact string value

    Returns:
        The matching Capability

    Raises:
        UnknownCapabilityError: If the value is not part of the vocabulary
    """
    if isinstance(value, Capability):
        return value
    if isinstance(value, str):
        try:
            return Capability(value)
        except ValueError:
            pass
    raise UnknownCapabilityError(value)
