"""Route table — tries registered routes in order against a request URL.

Routes are registered during setup and frozen with ``compile()``.
Each lookup runs the matcher once per candidate; nothing is cached.
"""

import logging
from collections.abc import Callable
from typing import Any

from routematch.config import RouterConfig
from routematch.errors import ConfigurationError
from routematch.routing.matcher import match_route
from routematch.routing.route import Route, RouteMatch, RouteTemplate

logger = logging.getLogger("routematch.router")


class Router:
    """Ordered route table. The first registered route that fits wins.

    Usage::

        router = Router(RouterConfig(base_url="http://kakapo.com"))
        router.add("/users/:userid", get_user, name="user")
        router.compile()
        match = router.match("http://kakapo.com/users/1234?fields=name")
        match.components  # {"userid": "1234"}
    """

    __slots__ = ("_compiled", "_config", "_names", "_routes")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._routes: list[Route] = []
        self._names: set[str] = set()
        self._compiled = False

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def add(
        self,
        path: str,
        handler: Callable[..., Any],
        *,
        name: str | None = None,
        base_url: str | None = None,
    ) -> Route:
        """Register a route. Must be called before compile().

        The route lives under the router's configured base URL unless
        *base_url* is given.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise ConfigurationError(msg)
        if name is not None and name in self._names:
            msg = f"Route name {name!r} is already registered."
            raise ConfigurationError(msg)

        template = RouteTemplate(
            base_url=self._config.base_url if base_url is None else base_url,
            path=path,
        )
        route = Route(template=template, handler=handler, name=name)
        self._routes.append(route)
        if name is not None:
            self._names.add(name)
        return route

    def route(
        self, path: str, *, name: str | None = None, base_url: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of ``add``::

        @router.route("/users/:userid")
        def get_user(match): ...
        """

        def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
            self.add(path, handler, name=name, base_url=base_url)
            return handler

        return decorator

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, request_url: str) -> RouteMatch | None:
        """Return the first route that fits *request_url*, or ``None``."""
        for route in self._routes:
            info = match_route(route.base_url, route.path, request_url)
            if self._config.debug:
                logger.debug(
                    "%s %r against %r + %r",
                    "Matched" if info is not None else "Tried",
                    request_url,
                    route.base_url,
                    route.path,
                )
            if info is not None:
                return RouteMatch(route=route, info=info)
        return None
