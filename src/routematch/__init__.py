"""routematch — match request URLs against base URL + path pattern routes.

Basic usage::

    from routematch import match_route

    info = match_route("http://kakapo.com", "/users/:userid",
                       "http://kakapo.com/users/1234?a=b&a=c")
    info.components        # {"userid": "1234"}
    info.query_parameters  # QueryItems([('a', 'b'), ('a', 'c')])

A request that doesn't fit returns ``None``, never an exception.
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "QueryItem",
    "QueryItems",
    "Route",
    "RouteMatch",
    "RouteMatchError",
    "RouteTemplate",
    "Router",
    "RouterConfig",
    "URLInfo",
    "match_route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routematch`` fast while providing a clean top-level API.
    """
    if name == "match_route":
        from routematch.routing.matcher import match_route

        return match_route

    if name == "Router":
        from routematch.routing.router import Router

        return Router

    if name in ("Route", "RouteMatch", "RouteTemplate", "URLInfo"):
        from routematch.routing import route as _route

        return getattr(_route, name)

    if name in ("QueryItem", "QueryItems"):
        from routematch.http import query as _query

        return getattr(_query, name)

    if name == "RouterConfig":
        from routematch.config import RouterConfig

        return RouterConfig

    if name in ("RouteMatchError", "ConfigurationError"):
        from routematch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
