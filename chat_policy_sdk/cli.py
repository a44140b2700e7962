"""CLI entry point for the chat policy SDK."""

import argparse
import json
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from .config.models import DEFAULT_MODEL
from .core.capabilities import get_capabilities_for_model
from .core.policy import get_timeout_budget_by_model, show_plugins
from .core.registry import get_default_registry
from .core.versioning import semver_compare
from .errors import PolicyError
from .models.provider import ServiceProvider


def inspect_model(model: str, provider: Optional[str] = None):
    """Print every policy decision for a model."""
    capabilities = get_capabilities_for_model(model)
    budget = get_timeout_budget_by_model(model)
    service_provider = ServiceProvider.from_id(provider)

    print(f"Model: {model}")
    if service_provider:
        print(f"Provider: {service_provider.value}")
    print("-" * 50)
    for flag, value in capabilities.model_dump(exclude={"model"}).items():
        status = "✓" if value else "✗"
        print(f"{status} {flag}")
    print(f"Timeout: {budget.milliseconds} ms ({budget.value})")
    if service_provider:
        print(f"Plugins: {'shown' if show_plugins(service_provider, model) else 'hidden'}")


def list_models(provider: Optional[str] = None, as_json: bool = False):
    """List registry models, optionally for one provider id."""
    registry = get_default_registry()
    descriptors = registry.for_provider(provider) if provider else list(registry)

    if as_json:
        print(json.dumps([d.model_dump(by_alias=True) for d in descriptors], indent=2))
        return

    print("Registered Models:")
    print("-" * 50)
    for descriptor in descriptors:
        status = "✓" if descriptor.available else "✗"
        print(f"{status} {descriptor.name} ({descriptor.provider.provider_name or descriptor.provider.id})")


def compare_versions(a: str, b: str):
    result = semver_compare(a, b)
    symbol = "<" if result < 0 else ">" if result > 0 else "="
    print(f"{a} {symbol} {b}")


def main(argv=None):
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="Chat Policy SDK CLI")
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Inspect command
    inspect_parser = subparsers.add_parser('inspect', help='Show capabilities and policies of a model')
    inspect_parser.add_argument('model', nargs='?', default=DEFAULT_MODEL,
                                help=f'Model identifier (default: {DEFAULT_MODEL})')
    inspect_parser.add_argument('--provider', help='Provider id or name (e.g., "openai")')

    # List models command
    list_parser = subparsers.add_parser('list-models', help='List registered models')
    list_parser.add_argument('--provider', help='Only models of this provider id')
    list_parser.add_argument('--json', action='store_true', help='Print JSON')

    # Timeout command
    timeout_parser = subparsers.add_parser('timeout', help='Print the request timeout for a model')
    timeout_parser.add_argument('model', nargs='?', default=DEFAULT_MODEL,
                                help=f'Model identifier (default: {DEFAULT_MODEL})')

    # Compare versions command
    compare_parser = subparsers.add_parser('compare-versions', help='Compare two version strings')
    compare_parser.add_argument('a', help='First version')
    compare_parser.add_argument('b', help='Second version')

    args = parser.parse_args(argv)
    load_dotenv()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s %(message)s")

    try:
        if args.command == 'inspect':
            inspect_model(args.model, args.provider)
        elif args.command == 'list-models':
            list_models(args.provider, args.json)
        elif args.command == 'timeout':
            print(get_timeout_budget_by_model(args.model).milliseconds)
        elif args.command == 'compare-versions':
            compare_versions(args.a, args.b)
        else:
            parser.print_help()
    except PolicyError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
