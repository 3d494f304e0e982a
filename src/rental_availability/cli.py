from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date
from typing import Any, Optional, Sequence

import httpx
import orjson
from postgrest.exceptions import APIError
from supabase import AuthError

from .bootstrap import configure_logging
from .data import SupabaseNotInitializedError, SupabaseSessionMissingError
from .domain import AvailabilityError, AvailabilityRange, parse_date
from .services import AuthService, AvailabilityService, ServiceContext

logger = logging.getLogger(__name__)

REPORTED_ERRORS = (
    AvailabilityError,
    SupabaseNotInitializedError,
    SupabaseSessionMissingError,
    AuthError,
    APIError,
    httpx.HTTPError,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage rental property availability.")
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON.")
    parser.add_argument("--today", type=parse_date, default=None, help=argparse.SUPPRESS)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("properties", help="List the signed-in owner's properties.")

    show_parser = subparsers.add_parser("show", help="Show blocked date ranges for a property.")
    show_parser.add_argument("property_id")

    toggle_parser = subparsers.add_parser("toggle", help="Block or release a single date.")
    toggle_parser.add_argument("property_id")
    toggle_parser.add_argument("date", type=parse_date)

    unblock_parser = subparsers.add_parser("unblock", help="Release every blocked date in a range.")
    unblock_parser.add_argument("property_id")
    unblock_parser.add_argument("start", type=parse_date)
    unblock_parser.add_argument("end", type=parse_date)

    return parser


def _serialize_range(span: AvailabilityRange) -> dict:
    return {"start_date": span.start_date, "end_date": span.end_date, "reason": span.reason}


def _emit(payload: Any, *, as_json: bool) -> None:
    if as_json:
        sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode() + "\n")
        return
    if isinstance(payload, list):
        for item in payload:
            sys.stdout.write(" ".join(str(value) for value in item.values()) + "\n")
    else:
        sys.stdout.write(" ".join(f"{key}={value}" for key, value in payload.items()) + "\n")


async def _sign_in(context: ServiceContext) -> None:
    owner = context.settings.owner
    if not owner.email or not owner.password:
        raise SystemExit("RENTAL_OWNER_EMAIL and RENTAL_OWNER_PASSWORD must be set.")
    await AuthService(context).sign_in_with_password(owner.email, owner.password)


async def run(args: argparse.Namespace, context: Optional[ServiceContext] = None) -> int:
    context = context or ServiceContext()
    await _sign_in(context)
    service = AvailabilityService(context)
    today: Optional[date] = args.today

    if args.command == "properties":
        properties = await context.properties.list_for_owner()
        _emit([{"id": item.id, "title": item.title, "status": item.status} for item in properties], as_json=args.json)
        return 0

    await service.select_property(args.property_id)

    if args.command == "show":
        _emit([_serialize_range(span) for span in service.ranges()], as_json=args.json)
    elif args.command == "toggle":
        outcome = await service.toggle(args.date, today=today)
        _emit({"date": outcome.date, "status": outcome.status.value}, as_json=args.json)
    elif args.command == "unblock":
        released = await service.unblock_range(args.start, args.end, today=today)
        _emit({"released": released}, as_json=args.json)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("Running command %s", args.command)
    try:
        code = asyncio.run(run(args))
    except REPORTED_ERRORS as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    raise SystemExit(code)


if __name__ == "__main__":
    main()
