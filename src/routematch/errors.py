"""routematch exception hierarchy.

Matching itself never raises: a request that does not fit a route is
``None``, not an error. These types cover misuse of the router and CLI.
"""


class RouteMatchError(Exception):
    """Base for all routematch-specific errors."""


class ConfigurationError(RouteMatchError):
    """Raised when a router or its configuration is invalid.

    Typically raised while routes are being registered, before any
    request is matched.
    """
