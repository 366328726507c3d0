"""
Example: resolving capabilities and recording observations.

Run with:
    python examples/resolve_capabilities.py
"""

import logging
import tempfile
from pathlib import Path

from llm_capabilities import Capability, CapabilitiesClient, CapabilitiesConfig


def main():
    logging.basicConfig(level=logging.INFO)

    workdir = Path(tempfile.mkdtemp())
    client = CapabilitiesClient(CapabilitiesConfig(
        cache_path=str(workdir / "cache.json"),
        index_path=str(workdir / "index.json"),
    ))

    for model in ("openai/o4-mini", "qwen/qwen3-235b", "anthropic/claude-sonnet-4.5"):
        resolution = client.resolve(model, Capability.STRUCTURED_OUTPUT)
        print(f"{model}: {resolution.supported} (from {resolution.tier.value})")

    # An observed failure with extended thinking enabled overrides every other tier
    client.record("anthropic/claude-sonnet-4.5", Capability.STRUCTURED_OUTPUT, False,
                  context={"thinking": True})
    print(client.resolve("anthropic/claude-sonnet-4.5", Capability.STRUCTURED_OUTPUT,
                         context={"thinking": True}))
    print(f"Cached observations: {client.size()}")


if __name__ == "__main__":
    main()
