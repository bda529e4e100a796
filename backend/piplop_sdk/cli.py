"""
Piplop CLI

Command-line tool for working with Piplop storyboards and IP registration.

Usage:
    piplop validate --storyboard storyboard.json
    piplop register --storyboard storyboard.json
    piplop status --ip-id 0x1234...
    piplop schema
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from . import __version__
from .client import PiplopClient
from .config import API_KEY_ENV, API_URL_ENV, DEFAULT_API_URL, load_env, resolve_settings
from .errors import PiplopError
from .schema import Storyboard


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="piplop",
        description="Piplop SDK CLI - Register video content as IP on Story Protocol",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--api-url",
        help=f"API base URL (env: {API_URL_ENV}, default: {DEFAULT_API_URL})",
    )
    parser.add_argument(
        "--api-key",
        help=f"API key for authentication (env: {API_KEY_ENV})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print request details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a storyboard JSON file")
    validate.add_argument("-s", "--storyboard", required=True, help="Path to storyboard JSON file")

    register = subparsers.add_parser("register", help="Register a storyboard as IP on Story Protocol")
    register.add_argument("-s", "--storyboard", required=True, help="Path to storyboard JSON file")

    status = subparsers.add_parser("status", help="Check IP registration status")
    status.add_argument("--ip-id", required=True, help="Story Protocol IP ID")

    subparsers.add_parser("schema", help="Generate JSON schema for storyboard format")

    return parser


def cmd_validate(args: argparse.Namespace) -> int:
    try:
        storyboard = Storyboard.from_file(args.storyboard)
    except PiplopError as e:
        print(f"✗ Invalid storyboard: {e}", file=sys.stderr)
        return 1

    print(f"✓ Valid storyboard: {storyboard.title}")
    print(f"  Duration: {storyboard.duration:.1f}s")
    print(f"  Layers: {len(storyboard.layers)}")
    return 0


def cmd_register(args: argparse.Namespace) -> int:
    try:
        storyboard = Storyboard.from_file(args.storyboard)
    except PiplopError as e:
        print(f"✗ Invalid storyboard: {e}", file=sys.stderr)
        return 1

    settings = resolve_settings(args.api_url, args.api_key)
    client = PiplopClient(settings.api_url, verbose=args.verbose)
    if settings.api_key:
        client = client.with_api_key(settings.api_key)

    print(f"Registering storyboard: {storyboard.title}")
    try:
        ip_id = asyncio.run(client.register_storyboard(storyboard))
    except PiplopError as e:
        print(f"✗ Registration failed: {e}", file=sys.stderr)
        return 1

    print(f"✓ Registered as IP: {ip_id}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    settings = resolve_settings(args.api_url, args.api_key)
    # Status lookups are unauthenticated
    client = PiplopClient(settings.api_url, verbose=args.verbose)

    try:
        status = asyncio.run(client.get_ip_status(args.ip_id))
    except PiplopError as e:
        print(f"✗ Failed to get status: {e}", file=sys.stderr)
        return 1

    print(json.dumps(status, indent=2, ensure_ascii=False))
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    print(json.dumps(Storyboard.json_schema(), indent=2))
    return 0


COMMANDS = {
    "validate": cmd_validate,
    "register": cmd_register,
    "status": cmd_status,
    "schema": cmd_schema,
}


def main(argv: Optional[List[str]] = None) -> int:
    load_env()
    args = build_parser().parse_args(argv)
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
