# scripts/add_address_entry.py
"""
Looks up an address by postcode and house number, picks one candidate and
stores it in the address book together with a person's name.

Example:
    python -m scripts.add_address_entry 1345 350 --first-name Ada --last-name Lovelace
"""
import argparse
import asyncio
import sys
from typing import List, Optional

import structlog

from application.services.field_store import (
    FIRST_NAME,
    HOUSE_NUMBER,
    LAST_NAME,
    POST_CODE,
    SELECTED_ADDRESS_ID,
)
from application.use_cases.address_entry import AddressEntryUseCase
from core_domain.value_objects.field_kind import InputEvent
from infrastructure.config.settings import settings
from infrastructure.container import build_address_entry_use_case
from infrastructure.logging_config import setup_logging
from infrastructure.monitoring.metrics_server import start_metrics_server

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find an address and add it to the address book.")
    parser.add_argument("postcode", help="Post code to search for")
    parser.add_argument("house_number", help="House number to search for")
    parser.add_argument("--first-name", default="", help="First name of the person living there")
    parser.add_argument("--last-name", default="", help="Last name of the person living there")
    parser.add_argument("--pick", type=int, default=1,
                        help="1-based position of the candidate to select (default: 1)")
    parser.add_argument("--metrics", action="store_true",
                        help=f"Expose Prometheus metrics on port {settings.APP_METRICS_PORT}")
    return parser


async def run(use_case: AddressEntryUseCase, args: argparse.Namespace) -> int:
    use_case.handle_change(POST_CODE, InputEvent.text(args.postcode))
    use_case.handle_change(HOUSE_NUMBER, InputEvent.text(args.house_number))

    addresses = await use_case.submit_search()
    if addresses is None:
        print(f"Error: {use_case.view().error}", file=sys.stderr)
        return 1

    for position, address in enumerate(addresses, start=1):
        print(f"{position}. {address.street} {address.house_number}, {address.postcode} {address.city}")

    if not 1 <= args.pick <= len(addresses):
        print(f"Error: --pick must be between 1 and {len(addresses)}", file=sys.stderr)
        return 2

    use_case.handle_change(SELECTED_ADDRESS_ID, InputEvent.radio(addresses[args.pick - 1].id))
    use_case.handle_change(FIRST_NAME, InputEvent.text(args.first_name))
    use_case.handle_change(LAST_NAME, InputEvent.text(args.last_name))

    entry = use_case.submit_person()
    if entry is None:
        print(f"Error: {use_case.view().error}", file=sys.stderr)
        return 1

    print(f"Saved {entry.first_name} {entry.last_name} at {entry.address.street} {entry.address.house_number}")
    use_case.clear()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=settings.LOG_LEVEL, force_json=settings.LOG_JSON)
    if args.metrics:
        start_metrics_server(settings.APP_METRICS_PORT, block=False)
    use_case = build_address_entry_use_case(settings)
    return asyncio.run(run(use_case, args))


if __name__ == "__main__":
    sys.exit(main())
