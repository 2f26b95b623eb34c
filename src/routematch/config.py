"""Router configuration.

One RouterConfig per Router: the base URL its routes default to and how
loudly route lookups are logged.
"""

from dataclasses import dataclass

from routematch.errors import ConfigurationError

LOG_LEVELS: frozenset[str] = frozenset({"debug", "info", "warning", "error", "critical"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(base_url="http://kakapo.com", debug=True)
    """

    # Base URL every route is registered under unless given its own.
    # Without a scheme it matches any scheme and any subdomain.
    base_url: str = ""

    # Log every candidate route tried at DEBUG level
    debug: bool = False

    # Level the CLI hands to logging.basicConfig
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.log_level.lower() not in LOG_LEVELS:
            allowed = ", ".join(sorted(LOG_LEVELS))
            msg = f"Unknown log_level {self.log_level!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)
