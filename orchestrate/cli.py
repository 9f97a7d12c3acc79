"""
Command-line adapter for key-value operations.

Architectural role:
- Exposes the `Client` verbs to the terminal for quick inspection and scripting.
- Resolves the API token from `ORCHESTRATE_API_KEY` (or `--key-file`).

Command lifecycle:
1. Parse arguments.
2. Build a `Client` from the environment.
3. Run exactly one verb with `asyncio.run`.
4. Print the response body as JSON (or raw text).

Error handling strategy:
- Missing token or invalid arguments -> `argparse` usage error (exit status 2).
- Remote failures -> status and body on stderr, exit status 1.
- Transport failures propagate with a traceback.
"""

import argparse
import asyncio
import json
import logging
import sys

from orchestrate.client import Client
from orchestrate.errors import PreconditionError, RemoteError


def _render(body):
    """Return printable output for a decoded or raw response body."""
    if isinstance(body, str):
        return body
    return json.dumps(body, indent=2, ensure_ascii=False)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="orchestrate", description="Orchestrate key-value client"
    )
    parser.add_argument("--key-file", default=None, help="File holding the API key")
    parser.add_argument("--verbose", action="store_true", help="Log dispatched requests")

    commands = parser.add_subparsers(dest="command", required=True)

    get_cmd = commands.add_parser("get", help="Fetch one value")
    get_cmd.add_argument("collection")
    get_cmd.add_argument("key")

    list_cmd = commands.add_parser("list", help="List values in a collection")
    list_cmd.add_argument("collection")
    list_cmd.add_argument("--limit", type=int, default=None)
    list_cmd.add_argument("--start-key", default=None)
    list_cmd.add_argument("--end-key", default=None)

    put_cmd = commands.add_parser("put", help="Store a JSON value")
    put_cmd.add_argument("collection")
    put_cmd.add_argument("key")
    put_cmd.add_argument("data", help="JSON document")
    condition = put_cmd.add_mutually_exclusive_group()
    condition.add_argument("--if-match", default=None, help="Only update this version")
    condition.add_argument("--if-absent", action="store_true", help="Only create")

    remove_cmd = commands.add_parser("remove", help="Delete one value")
    remove_cmd.add_argument("collection")
    remove_cmd.add_argument("key")
    remove_cmd.add_argument("--purge", action="store_true")

    search_cmd = commands.add_parser("search", help="Query a collection")
    search_cmd.add_argument("collection")
    search_cmd.add_argument("query")

    drop_cmd = commands.add_parser("delete-collection", help="Delete a collection")
    drop_cmd.add_argument("collection")

    return parser


def dispatch(client, args):
    """Map parsed arguments to the matching client verb and return its awaitable."""
    if args.command == "get":
        return client.get(args.collection, args.key)
    if args.command == "list":
        return client.list(args.collection, args.limit, args.start_key, args.end_key)
    if args.command == "put":
        match = False if args.if_absent else args.if_match
        return client.put(args.collection, args.key, json.loads(args.data), match)
    if args.command == "remove":
        return client.remove(args.collection, args.key, args.purge)
    if args.command == "search":
        return client.search(args.collection, args.query)
    return client.delete_collection(args.collection)


def main(argv=None, transport=None):
    """CLI entrypoint. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        client = Client.from_env(args.key_file, transport=transport)
        awaitable = dispatch(client, args)
    except PreconditionError as err:
        parser.error(str(err))
    except json.JSONDecodeError as err:
        parser.error(f"data is not valid JSON: {err}")

    try:
        response = asyncio.run(awaitable)
    except RemoteError as err:
        print(f"HTTP {err.status_code}", file=sys.stderr)
        if err.body != "":
            print(_render(err.body), file=sys.stderr)
        return 1

    print(f"HTTP {response.status_code}")
    if response.body != "":
        print(_render(response.body))
    return 0


if __name__ == "__main__":
    sys.exit(main())
