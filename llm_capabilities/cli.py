"""CLI entry point for LLM Capabilities."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .api.client import CapabilitiesClient
from .config.settings import CapabilitiesConfig
from .errors import StorageError, UnknownCapabilityError
from .models.capabilities import Capability

EXIT_OK = 0
EXIT_STORAGE_ERROR = 1
EXIT_UNKNOWN_CAPABILITY = 2


def parse_context_value(raw: str) -> Any:
    """Parse ``true``/``false``/``null``/integers; anything else stays a string."""
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None
    try:
        return int(raw)
    except ValueError:
        return raw


def parse_context(pairs: Optional[List[str]]) -> Dict[str, Any]:
    context: Dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Context must be KEY=VALUE, got {pair!r}")
        context[key] = parse_context_value(value)
    return context


def parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"Expected true or false, got {raw!r}")


def build_client(args: argparse.Namespace) -> CapabilitiesClient:
    """Create a client from environment settings plus CLI overrides."""
    config = CapabilitiesConfig.from_env()
    overrides: Dict[str, Any] = {}
    if args.cache_path:
        overrides["cache_path"] = args.cache_path
    if args.index_path:
        overrides["index_path"] = args.index_path
    if overrides:
        config = config.copy_with(**overrides)
    return CapabilitiesClient(config=config, use_index=not args.no_index)


def _format_optional(value: Optional[bool]) -> str:
    if value is None:
        return "unknown"
    return "true" if value else "false"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LLM Capabilities CLI")
    parser.add_argument('--cache-path', help='Path to the empirical cache file')
    parser.add_argument('--index-path', help='Path to the model index file')
    parser.add_argument('--no-index', action='store_true', help='Skip the remote model index tier')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    supports_parser = subparsers.add_parser('supports', help='Resolve a capability through every tier')
    supports_parser.add_argument('model', help='Model id (e.g., "openai/o4-mini")')
    supports_parser.add_argument('capability', help='Capability name (e.g., "structured_output")')
    supports_parser.add_argument('--context', action='append', metavar='KEY=VALUE', help='Context modifier')

    record_parser = subparsers.add_parser('record', help='Record an observation in the cache')
    record_parser.add_argument('model', help='Model id')
    record_parser.add_argument('capability', help='Capability name')
    record_parser.add_argument('supported', type=parse_bool, help='true or false')
    record_parser.add_argument('--context', action='append', metavar='KEY=VALUE', help='Context modifier')

    lookup_parser = subparsers.add_parser('lookup', help='Read an observation from the cache only')
    lookup_parser.add_argument('model', help='Model id')
    lookup_parser.add_argument('capability', help='Capability name')
    lookup_parser.add_argument('--context', action='append', metavar='KEY=VALUE', help='Context modifier')

    subparsers.add_parser('clear', help='Remove every cached observation')
    subparsers.add_parser('size', help='Count cached observations')
    subparsers.add_parser('capabilities', help='List known capability names')

    return parser


def run(args: argparse.Namespace) -> int:
    if args.command == 'capabilities':
        for capability in Capability:
            print(capability.value)
        return EXIT_OK

    client = build_client(args)
    context = parse_context(getattr(args, 'context', None))

    if args.command == 'supports':
        resolution = client.resolve(args.model, args.capability, context=context)
        print(f"{'true' if resolution.supported else 'false'} (tier: {resolution.tier.value})")
    elif args.command == 'record':
        client.record(args.model, args.capability, args.supported, context=context)
        print(f"Recorded {args.model} {args.capability}={'true' if args.supported else 'false'}")
    elif args.command == 'lookup':
        print(_format_optional(client.lookup(args.model, args.capability, context=context)))
    elif args.command == 'clear':
        client.clear()
        print("Cache cleared")
    elif args.command == 'size':
        print(client.size())
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    try:
        return run(args)
    except UnknownCapabilityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_UNKNOWN_CAPABILITY
    except StorageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_STORAGE_ERROR
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
