"""Canonical cache keys for (model, capability, context) triples."""

import json
from typing import Any, Mapping, Optional

Context = Optional[Mapping[str, Any]]


def stringify_context_value(value: Any) -> str:
    """
    Render a context value for use in a cache key.

    None renders as an empty string, booleans as ``true``/``false``, integers
    in decimal, strings unchanged and floats via ``repr``. Any other value is
    rendered as compact JSON with sorted keys. Integer subclasses such as
    ``IntEnum`` members are rendered by their plain decimal value.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return repr(value)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def context_suffix(context: Context) -> str:
    """Return the comma-joined ``key=value`` pairs sorted by key, or ''."""
    if not context:
        return ""
    pairs = sorted(((str(k), v) for k, v in context.items()), key=lambda kv: kv[0])
    return ",".join(f"{k}={stringify_context_value(v)}" for k, v in pairs)


def cache_key(model: str, capability: Any, context: Context = None) -> str:
    """Build ``model:capability[:k=v,...]``; an empty context adds nothing."""
    base = f"{model}:{getattr(capability, 'value', capability)}"
    suffix = context_suffix(context)
    if not suffix:
        return base
    return f"{base}:{suffix}"
