"""Cache server target resolution."""

from urllib.parse import urlsplit

from cacheban.core.entities.cache_server_config import CacheServerConfig
from cacheban.core.exceptions import InvalidConfigError


def resolve_target(site_url: str, config: CacheServerConfig) -> str:
    """Build the base URL ban requests are sent to.

    The scheme, host and path come from the site URL. The port is
    ``config.port_override`` when set, otherwise the site URL's own
    port. When neither is present no port is written and the
    transport uses the scheme default.

    Args:
        site_url: The host's canonical site URL.
        config: The cache server configuration.

    Returns:
        ``scheme://host[:port]`` followed by the site URL's path.

    Raises:
        InvalidConfigError: If the site URL lacks a scheme or host,
            or carries an invalid port.
    """
    if not isinstance(site_url, str):
        raise InvalidConfigError(f"Site URL must be a string, got {site_url!r}")

    try:
        parts = urlsplit(site_url)
        site_port = parts.port
    except ValueError as e:
        raise InvalidConfigError(f"Invalid site URL {site_url!r}: {e}") from e

    host = parts.hostname
    if not parts.scheme or not host:
        raise InvalidConfigError(
            f"Site URL {site_url!r} must include a scheme and a host"
        )

    if ":" in host:
        host = f"[{host}]"

    port = config.port_override if config.port_override is not None else site_port

    netloc = host if port is None else f"{host}:{port}"
    return f"{parts.scheme}://{netloc}{parts.path}"
