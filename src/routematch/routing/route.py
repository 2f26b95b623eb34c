"""RouteTemplate, Route, URLInfo and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from routematch.http.query import QueryItems


@dataclass(frozen=True, slots=True)
class URLInfo:
    """Result of a successful match.

    ``components`` maps each wildcard name (without the ``:``) to the
    request segment found at its position. ``query_parameters`` holds
    the request's query string in URL order.

    Compared by value, never hashed: ``components`` is a plain dict
    owned by the caller.
    """

    __hash__ = None  # type: ignore[assignment]

    components: dict[str, str] = field(default_factory=dict)
    query_parameters: QueryItems = field(default_factory=QueryItems)


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A base URL and a path pattern that together describe a route.

    Examples::

        RouteTemplate("http://kakapo.com", "/users/:userid")
        RouteTemplate("kakapo.com", "/any")   # any scheme, any subdomain
    """

    base_url: str
    path: str

    @property
    def is_wildcard_base(self) -> bool:
        """True when ``base_url`` carries no scheme."""
        from routematch.routing.matcher import has_scheme

        return not has_scheme(self.base_url)

    def match(self, request_url: str) -> URLInfo | None:
        """Match *request_url* against this template. ``None`` if it doesn't fit."""
        from routematch.routing.matcher import match_route

        return match_route(self.base_url, self.path, request_url)


@dataclass(frozen=True, slots=True)
class Route:
    """A route registered on a Router."""

    template: RouteTemplate
    handler: Callable[..., Any]
    name: str | None = None

    @property
    def base_url(self) -> str:
        return self.template.base_url

    @property
    def path(self) -> str:
        return self.template.path


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful router lookup."""

    route: Route
    info: URLInfo

    @property
    def components(self) -> dict[str, str]:
        return self.info.components

    @property
    def query_parameters(self) -> QueryItems:
        return self.info.query_parameters
