#!/usr/bin/env python3
"""
Chad Log CLI

Command-line client for the Chad Log API, plus a command to run the
server itself.

Commands:

1) send
   - POST a message to /logs and print the stored entry's id

2) list
   - GET /logs with optional --after / --contains / --limit / --offset
   - prints one "[timestamp] message" line per entry

3) count
   - GET /logs/count

4) ping
   - GET /ping

5) serve
   - start the API with uvicorn on CHAD_LOG_ADDRESS:CHAD_LOG_PORT
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import requests

from configs.settings import settings
from cli.client import LogApiClient


# ---------------------------------------------------------------------------
# Client commands
# ---------------------------------------------------------------------------


def cmd_send(client: LogApiClient, message: str) -> None:
    entry = client.send(message)
    print(f"[Chad Log] ✓ Stored {entry['id']} at {entry['timestamp']}")


def cmd_list(
    client: LogApiClient,
    after: Optional[str],
    contains: Optional[str],
    limit: Optional[int],
    offset: Optional[int],
) -> None:
    entries = client.list_logs(
        after=after,
        contains=contains,
        limit=limit,
        offset=offset,
    )
    for entry in entries:
        print(f"[{entry['timestamp']}] {entry['message']}")


def cmd_count(client: LogApiClient) -> None:
    print(client.count())


def cmd_ping(client: LogApiClient) -> None:
    resp = client.ping()
    print(f"[{resp['timestamp']}] {resp['message']} (id={resp['id']})")


# ---------------------------------------------------------------------------
# Server command
# ---------------------------------------------------------------------------


def cmd_serve(reload: bool) -> None:
    """
    Run the API server in the foreground.

    Lazy import so the client commands work without uvicorn installed.
    """
    import uvicorn

    print(f"[Chad Log] Server running on http://{settings.address}:{settings.port}")
    uvicorn.run(
        "runtime.api.server:app",
        host=settings.address,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=reload,
    )


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chad Log CLI")
    parser.add_argument(
        "-a",
        "--api",
        default=settings.api_url,
        help="API base URL (default: CHAD_LOG_API_URL or http://127.0.0.1:3000)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # send
    p_send = subparsers.add_parser("send", help="Send a log message to the server")
    p_send.add_argument("message", help="Log message text")

    # list
    p_list = subparsers.add_parser("list", help="List logs from the server")
    p_list.add_argument("--after", help="Only entries strictly after this RFC 3339 timestamp")
    p_list.add_argument("--contains", help="Only entries whose message contains this text")
    p_list.add_argument("--limit", type=int, help="Maximum number of entries (server default: 50)")
    p_list.add_argument("--offset", type=int, help="Number of entries to skip (default: 0)")

    # count
    subparsers.add_parser("count", help="Number of stored log entries")

    # ping
    subparsers.add_parser("ping", help="Ping the server")

    # serve
    p_serve = subparsers.add_parser("serve", help="Run the Chad Log API server")
    p_serve.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    command: str = args.command

    if command == "serve":
        cmd_serve(reload=args.reload)
        return 0

    client = LogApiClient(args.api)

    try:
        if command == "send":
            cmd_send(client, args.message)
        elif command == "list":
            cmd_list(
                client,
                after=args.after,
                contains=args.contains,
                limit=args.limit,
                offset=args.offset,
            )
        elif command == "count":
            cmd_count(client)
        elif command == "ping":
            cmd_ping(client)
        else:
            parser.error(f"Unknown command: {command}")
    except requests.exceptions.ConnectionError:
        print(f"[Chad Log] Failed to connect to {args.api} (is the server running?)", file=sys.stderr)
        return 1
    except requests.exceptions.RequestException as e:
        print(f"[Chad Log] API error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
