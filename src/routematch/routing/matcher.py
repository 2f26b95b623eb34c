"""Route matching — does a request URL fit a base URL plus path pattern?

A route is a base URL and a path. The base URL must be contained in the
request URL; what follows it is compared with the path segment by
segment. A base URL with a scheme only matches requests with that same
scheme. Without one it is a wildcard that any scheme or subdomain
matches::

    base "http://kakapo.com", path "any", "http://kakapo.com/any"    -> match
    base "http://kakapo.com", path "any", "https://kakapo.com/any"   -> None
    base "kakapo.com",        path "any", "https://kakapo.com/any"   -> match
    base "kakapo.com",        path "any", "https://api.kakapo.com/any" -> match

Path segments prefixed with ``:`` are wildcards. Each one captures the
request segment at its position under its own name. Every other segment
must be equal in both::

    "/users/:userid"     vs "/users/1234" -> {"userid": "1234"}
    "/comment/:commentid" vs "/users/1234" -> None

Anything after ``?`` never takes part in matching; it is parsed into
``URLInfo.query_parameters``.
"""

import logging

from routematch.http.query import parse_query
from routematch.routing.route import URLInfo

logger = logging.getLogger("routematch.matcher")

WILDCARD_PREFIX = ":"
SCHEME_SEPARATOR = "://"


def substring_before(text: str, token: str) -> str | None:
    """Return the part of *text* preceding the first *token*.

    ``None`` if *token* does not occur. An empty *token* returns *text*.

    Example: ``("kakapo.com/users?a=b", "?") -> "kakapo.com/users"``
    """
    if not token:
        return text
    index = text.find(token)
    if index < 0:
        return None
    return text[:index]


def substring_after(text: str, token: str) -> str | None:
    """Return the part of *text* following the first *token*.

    ``None`` if *token* does not occur. An empty *token* returns *text*.

    Example: ``("kakapo.com/users", "kakapo.com") -> "/users"``
    """
    if not token:
        return text
    index = text.find(token)
    if index < 0:
        return None
    return text[index + len(token) :]


def split_path(path: str) -> list[str]:
    """Split *path* on ``/``, dropping empty segments.

    ``"/users/1234"``, ``"users/1234/"`` and ``"users//1234"`` all give
    ``["users", "1234"]``.
    """
    return [segment for segment in path.split("/") if segment]


def has_scheme(base_url: str) -> bool:
    """True when *base_url* is scheme-qualified (``http://...``)."""
    return SCHEME_SEPARATOR in base_url


def match_route(base_url: str, path: str, request_url: str) -> URLInfo | None:
    """Match *request_url* against the route ``base_url`` + ``path``.

    Args:
        base_url: Base of the route, with or without a scheme
            (e.g. ``"http://kakapo.com/api"`` or ``"kakapo.com"``).
        path: Path pattern, may contain ``:name`` wildcards
            (e.g. ``"/users/:id"``).
        request_url: Absolute URL of the request
            (e.g. ``"https://kakapo.com/api/users/1234?a=b"``).

    Returns:
        A ``URLInfo`` with the captured components and the query
        parameters, or ``None`` if the request doesn't fit the route.

    """
    relevant_url = substring_before(request_url, "?")
    if relevant_url is None:
        relevant_url = request_url
        query = ""
    else:
        query = request_url[len(relevant_url) + 1 :]

    remainder = substring_after(relevant_url, base_url)
    if remainder is None:
        logger.debug(
            "No match: %s base %r not in %r",
            "scheme" if has_scheme(base_url) else "wildcard",
            base_url,
            relevant_url,
        )
        return None

    route_segments = split_path(path)
    request_segments = split_path(remainder)

    if len(route_segments) != len(request_segments):
        logger.debug(
            "No match: %r has %d segments, %r has %d",
            path,
            len(route_segments),
            remainder,
            len(request_segments),
        )
        return None

    components: dict[str, str] = {}
    for route_segment, request_segment in zip(route_segments, request_segments, strict=True):
        if route_segment == request_segment:
            continue
        if not route_segment.startswith(WILDCARD_PREFIX):
            logger.debug("No match: segment %r != %r", route_segment, request_segment)
            return None
        components[route_segment[len(WILDCARD_PREFIX) :]] = request_segment

    return URLInfo(components=components, query_parameters=parse_query(query))
