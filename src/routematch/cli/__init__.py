"""routematch CLI — try a URL against a route, list and resolve router tables.

Entry point registered as ``routematch`` in ``pyproject.toml``::

    [project.scripts]
    routematch = "routematch.cli:main"
"""

import argparse
import sys

from routematch.config import LOG_LEVELS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routematch`` command."""
    parser = argparse.ArgumentParser(
        prog="routematch",
        description="routematch — match request URLs against base URL + path routes.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=sorted(LOG_LEVELS),
        help="Logging level (default: the router config's log_level, else warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routematch match -------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match one URL against one route")
    match_parser.add_argument("base_url", help="Route base URL (e.g. http://kakapo.com)")
    match_parser.add_argument("path", help="Route path pattern (e.g. /users/:userid)")
    match_parser.add_argument("request_url", help="Request URL to match")
    match_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    # -- routematch routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes registered on a router")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- routematch resolve -----------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show which registered route matches a URL"
    )
    resolve_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    resolve_parser.add_argument("request_url", help="Request URL to resolve")
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from routematch.cli._match import run_match

        run_match(args)
    elif args.command == "routes":
        from routematch.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from routematch.cli._match import run_resolve

        run_resolve(args)
