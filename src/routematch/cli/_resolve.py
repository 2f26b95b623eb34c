"""Router loading for ``routematch routes`` and ``routematch resolve``.

Turns a ``module:attribute`` string into a Router and applies that
router's configured log level unless ``--log-level`` was given.
"""

import argparse
import importlib
import inspect
import logging
import sys

from routematch.config import RouterConfig
from routematch.routing.router import Router

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send routematch records to stderr at *level*."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("routematch").setLevel(level.upper())


def resolve_router(import_string: str) -> Router:
    """Load the Router named by *import_string*.

    ``"myapp.routes:api"`` reads ``api`` from ``myapp.routes``; a bare
    ``"myapp.routes"`` reads ``router``. The attribute may be a Router
    or a function that builds one when called without arguments.
    Classes are refused, ``routematch:Router`` would only yield an
    empty table.

    Raises:
        ModuleNotFoundError: The module cannot be imported.
        AttributeError: The module has no such attribute.
        TypeError: The attribute is a class, its factory fails, or it
            does not produce a Router.

    """
    module_path, _, attr_name = import_string.partition(":")
    target = getattr(importlib.import_module(module_path), attr_name or "router")

    if isinstance(target, Router):
        return target

    if inspect.isclass(target):
        msg = (
            f"{import_string!r} is the class {target.__name__}; "
            "point at a Router instance or a function returning one"
        )
        raise TypeError(msg)

    if not callable(target):
        msg = f"{import_string!r} is a {type(target).__name__}, expected a routematch Router"
        raise TypeError(msg)

    try:
        built = target()
    except Exception as exc:
        msg = f"Router factory {import_string!r} failed: {exc}"
        raise TypeError(msg) from exc

    if not isinstance(built, Router):
        msg = f"Router factory {import_string!r} returned {type(built).__name__}, not a Router"
        raise TypeError(msg)
    return built


def load_router(args: argparse.Namespace) -> Router:
    """Resolve ``args.router`` and set up logging, exiting 1 if it can't be loaded."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(args.log_level or router.config.log_level)
    return router


def default_log_level(args: argparse.Namespace) -> str:
    """Log level for commands that don't load a router."""
    return args.log_level or RouterConfig().log_level
