import argparse
import sys
from datetime import datetime

from subverify.config.exceptions import ConfigInvalidError
from subverify.config.settings import Settings
from subverify.database.connection import close_pool
from subverify.ledger.factory import LedgerFactory
from subverify.listing.exceptions import ListingAccessDeniedError
from subverify.listing.service import ListingService, render_listing_page
from subverify.listing.session import Direction
from subverify.logging.logger import Log
from subverify.verification.messages import (
    is_link_request,
    render_channel_link,
    render_outcome,
)
from subverify.verification.models import Attachment, Requester
from subverify.verification.requests import request_from_command
from subverify.verification.verifier import build_verifier


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subverify",
        description="Verify channel subscriptions from screenshots.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    verify = sub.add_parser("verify", help="Verify one screenshot")
    verify.add_argument("--user-id", required=True)
    verify.add_argument("--username", required=True)
    verify.add_argument(
        "--account-created",
        type=datetime.fromisoformat,
        required=True,
        help="Account creation time, ISO-8601",
    )
    verify.add_argument("--image-url", default=None)
    verify.add_argument("--filename", default=None)

    subscribers = sub.add_parser("subscribers", help="List verified subscribers")
    subscribers.add_argument("--user-id", required=True)

    link = sub.add_parser("link", help="Answer a chat message asking for the channel link")
    link.add_argument("content", help="Message text")
    return parser


def _run_verify(args: argparse.Namespace, settings: Settings) -> int:
    verifier = build_verifier(settings)
    requester = Requester(
        id=args.user_id,
        username=args.username,
        account_created_at=args.account_created,
    )
    attachment = Attachment(args.image_url, args.filename) if args.image_url else None
    outcome = verifier.verify(request_from_command(requester, attachment))
    message = render_outcome(outcome, settings)
    print(message.title)
    print(message.description)
    return 0 if outcome.verified else 1


def _run_subscribers(args: argparse.Namespace, settings: Settings) -> int:
    service = ListingService(
        LedgerFactory.create(settings),
        settings.owner_id,
        page_size=settings.listing_page_size,
        timeout_seconds=settings.listing_timeout_seconds,
    )
    try:
        session = service.open(args.user_id)
    except ListingAccessDeniedError:
        print("Only the bot owner can list subscribers.")
        return 1
    print(render_listing_page(session))
    for _ in range(session.page_count - 1):
        service.turn(session.session_id, args.user_id, Direction.NEXT)
        print()
        print(render_listing_page(session))
    return 0


def _run_link(args: argparse.Namespace, settings: Settings) -> int:
    if not is_link_request(args.content):
        return 1
    message = render_channel_link(settings)
    print(message.title)
    print(message.description)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> validate -> run the requested command."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    try:
        settings.validate_required()
    except ConfigInvalidError as exc:
        Log.error(f"Invalid configuration: {exc}")
        return 2

    try:
        if args.command == "verify":
            return _run_verify(args, settings)
        if args.command == "link":
            return _run_link(args, settings)
        return _run_subscribers(args, settings)
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
