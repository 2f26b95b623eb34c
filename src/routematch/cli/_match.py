"""``routematch match`` and ``routematch resolve`` — show what a URL matches.

Both exit 0 on a match and 1 when nothing fits, so they can be used in
shell conditionals.
"""

import argparse
import json
import logging
import sys

from routematch.cli._resolve import configure_logging, default_log_level, load_router
from routematch.routing.matcher import match_route
from routematch.routing.route import URLInfo

logger = logging.getLogger("routematch.cli")


def _info_to_dict(info: URLInfo) -> dict[str, object]:
    return {
        "components": dict(info.components),
        "query_parameters": [list(item.as_tuple()) for item in info.query_parameters],
    }


def _print_info(info: URLInfo) -> None:
    if info.components:
        print("components:")
        for key, value in info.components.items():
            print(f"  {key} = {value}")
    else:
        print("components: (none)")

    if info.query_parameters:
        print("query parameters:")
        for item in info.query_parameters:
            if item.value is None:
                print(f"  {item.name}")
            else:
                print(f"  {item.name} = {item.value}")
    else:
        print("query parameters: (none)")


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.request_url`` against ``args.base_url`` + ``args.path``."""
    configure_logging(default_log_level(args))
    info = match_route(args.base_url, args.path, args.request_url)
    if info is None:
        logger.info("%r does not match %r + %r", args.request_url, args.base_url, args.path)
        if args.json:
            print(json.dumps({"match": False}))
        else:
            print("No match.", file=sys.stderr)
        raise SystemExit(1)

    if args.json:
        print(json.dumps({"match": True, **_info_to_dict(info)}))
    else:
        _print_info(info)


def run_resolve(args: argparse.Namespace) -> None:
    """Find the first route registered on ``args.router`` that fits ``args.request_url``."""
    router = load_router(args)

    match = router.match(args.request_url)
    if match is None:
        if args.json:
            print(json.dumps({"match": False}))
        else:
            print(f"No route matches {args.request_url!r}", file=sys.stderr)
        raise SystemExit(1)

    route = match.route
    if args.json:
        payload = {
            "match": True,
            "name": route.name,
            "base_url": route.base_url,
            "path": route.path,
            **_info_to_dict(match.info),
        }
        print(json.dumps(payload))
        return

    label = f" ({route.name})" if route.name else ""
    print(f"route: {route.base_url}{route.path}{label}")
    _print_info(match.info)
