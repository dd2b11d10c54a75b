"""URL normalization for exact-path bans."""

from urllib.parse import urlsplit

from cacheban.core.entities.ban_target import ExactPath
from cacheban.core.exceptions import InvalidUrlError


def normalize_url(raw_url: str) -> ExactPath:
    """Reduce a URL to the path the cache server knows it by.

    Scheme, credentials, host and port are dropped. The path is kept
    along with the query and fragment, exactly as written. A ``?`` or
    ``#`` delimiter is kept even when its component is empty.

    Strings without a scheme or ``//`` authority are treated as paths,
    so ``example.com/baz`` becomes ``/example.com/baz``.

    Args:
        raw_url: An absolute or relative URL.

    Returns:
        The ExactPath for the URL, always starting with ``/``.

    Raises:
        InvalidUrlError: If the URL cannot be split into components.

    Example:
        >>> normalize_url("http://example.com:8080/foo/bar?x=1#frag").path
        '/foo/bar?x=1#frag'
    """
    if not isinstance(raw_url, str):
        raise InvalidUrlError(raw_url, "expected a string")

    try:
        parts = urlsplit(raw_url)
    except ValueError as e:
        raise InvalidUrlError(raw_url, str(e)) from e

    # urlsplit does not tell an empty query from a missing one
    before_fragment, has_fragment, _ = raw_url.partition("#")
    has_query = "?" in before_fragment

    path = parts.path
    if has_query:
        path += "?" + parts.query
    if has_fragment:
        path += "#" + parts.fragment

    if not path.startswith("/"):
        path = "/" + path

    return ExactPath(path)
