"""
Main CLI entry point for fbgraph.

Classifies saved Graph API responses and fetches objects from the live API.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console

from .. import __version__
from .._classifier import classify
from .._client import Facebook
from .._exceptions import GraphAPIError, NetworkError
from .._types import RawResponse
from .display import show_failure, show_payload, show_success
from .util import graceful_main


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fbgraph",
        description="Facebook Graph API client and error classifier",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    classify_parser = subparsers.add_parser(
        "classify", help="Classify a saved response body (JSON or HTML)"
    )
    classify_parser.add_argument("file", type=Path, help="File holding the response body")
    classify_parser.add_argument(
        "--status", type=int, default=400, help="HTTP status of the response (default: 400)"
    )
    classify_parser.add_argument(
        "--anonymous",
        action="store_true",
        help="Treat the request as sent without an access token",
    )

    get_parser = subparsers.add_parser("get", help="Fetch a Graph object, e.g. 'me'")
    get_parser.add_argument("path", help="Object id or path")
    get_parser.add_argument(
        "--access-token", help="Access token (or set FACEBOOK_ACCESS_TOKEN environment variable)"
    )
    get_parser.add_argument("--base-url", help="Custom Graph API base URL")
    return parser


def _classify_command(args: argparse.Namespace, console: Console) -> int:
    try:
        body = args.file.read_bytes()
    except OSError as e:
        console.print(f"[red]❌ Cannot read {args.file}: {e}[/red]")
        return 2

    response = RawResponse(status_code=args.status, body=body)
    failure = classify(response, authorized=not args.anonymous)
    if failure is None:
        show_success(console)
        return 0
    show_failure(failure, console)
    return 1


def _get_command(args: argparse.Namespace, console: Console) -> int:
    with Facebook(access_token=args.access_token, base_url=args.base_url) as facebook:
        try:
            payload = facebook.fetch_object(args.path)
        except GraphAPIError as e:
            show_failure(e.failure, console)
            return 1
        except NetworkError as e:
            console.print(f"[red]❌ Network error: {e}[/red]")
            return 1
    show_payload(payload, console)
    return 0


def _real_main(argv: list[str], console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    console = console or Console()
    if args.command == "classify":
        return _classify_command(args, console)
    return _get_command(args, console)


def main() -> None:
    """Main CLI entry point with graceful interrupt handling."""
    code = graceful_main(_real_main, sys.argv[1:])
    raise SystemExit(code)


if __name__ == "__main__":
    main()
