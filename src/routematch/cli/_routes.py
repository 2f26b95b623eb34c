"""``routematch routes`` — list registered routes.

Resolves an import string to a Router and prints every route with its
name, base URL, path, and handler.
"""

import argparse

from routematch.cli._resolve import load_router


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a router, in registration order."""
    router = load_router(args)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        rows.append((route.name or "-", route.base_url or "*", route.path, handler_name))

    headers = ("NAME", "BASE", "PATH", "HANDLER")
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(3)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers))
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
