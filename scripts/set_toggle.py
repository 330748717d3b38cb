#!/usr/bin/env python3
"""Flip an administrative toggle through the admin API.

Applies the change optimistically and reports the value that stuck:

    scripts/set_toggle.py plan pro active false --token "$AUTH_TOKEN"
    scripts/set_toggle.py expert 42 featured_slot 3 --token "$AUTH_TOKEN"
    scripts/set_toggle.py expert 42 featured_slot null --token "$AUTH_TOKEN"
"""

import argparse
import asyncio
import json
import sys

import logfire

from circle.adapter.toggle import ToggleApiClient
from circle.application.optimistic import OptimisticMutationCoordinator
from circle.config import Settings
from circle.domain.error import DomainError
from circle.domain.value import FieldRef
from circle.util.observability import configure_logfire, instrument_httpx


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("resource")
    parser.add_argument("resource_id")
    parser.add_argument("field")
    parser.add_argument("value", help="true, false, a slot number or null")
    parser.add_argument("--token", required=True, help="Admin session token")
    parser.add_argument("--base-url", default=None)
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    field_ref = FieldRef(
        resource=args.resource, resource_id=args.resource_id, field=args.field
    )
    value = json.loads(args.value)
    base_url = args.base_url or settings.toggles.api_base_url or settings.api.base_url

    async with ToggleApiClient(
        base_url, auth_token=args.token, timeout=settings.toggles.timeout_seconds
    ) as client:
        coordinator = OptimisticMutationCoordinator(
            await client.get_toggles(field_ref.resource, field_ref.resource_id),
            timeout=settings.toggles.timeout_seconds,
            serialize_per_field=settings.toggles.serialize_per_field,
        )
        try:
            await coordinator.apply(field_ref, value, client.set_toggle)
        except DomainError as e:
            print(f"{field_ref.key}: {e} (kept {coordinator.get(field_ref)!r})")
            return 1

    print(f"{field_ref.key} = {coordinator.get(field_ref)!r}")
    return 0


def main() -> int:
    """Parse arguments and apply the toggle."""
    settings = Settings()
    configure_logfire(settings)
    instrument_httpx()

    args = parse_args(sys.argv[1:])
    with logfire.span("set_toggle_script", resource=args.resource, field=args.field):
        return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
