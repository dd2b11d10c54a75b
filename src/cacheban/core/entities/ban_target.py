"""Ban target value objects."""

from dataclasses import dataclass
from enum import Enum

from cacheban.core.exceptions import InvalidUrlError

BAN_METHOD_HEADER = "X-Ban-Method"
BAN_URL_HEADER = "X-Ban-Url"
BAN_REGEX_HEADER = "X-Ban-Regex"


class BanMethod(Enum):
    """How the cache server should match cached objects.

    URL: Exact match on the object's path.
    REGEX: Regular expression match, evaluated by the cache server.
    """

    URL = "url"
    REGEX = "regex"


@dataclass(frozen=True)
class ExactPath:
    """A canonical path (with optional query and fragment) to ban.

    Always starts with ``/``. Build instances from raw URLs with
    :func:`cacheban.core.services.url_normalizer.normalize_url`.
    """

    path: str

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.startswith("/"):
            raise InvalidUrlError(self.path, "path must start with '/'")

    @property
    def method(self) -> BanMethod:
        return BanMethod.URL

    @property
    def key(self) -> str:
        return self.path

    def to_headers(self) -> dict[str, str]:
        """Build the ban headers identifying this path."""
        return {
            BAN_METHOD_HEADER: self.method.value,
            BAN_URL_HEADER: self.path,
        }

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class RegexPattern:
    """A regular expression to ban, passed to the cache server verbatim."""

    pattern: str

    @property
    def method(self) -> BanMethod:
        return BanMethod.REGEX

    @property
    def key(self) -> str:
        return self.pattern

    def to_headers(self) -> dict[str, str]:
        """Build the ban headers identifying this pattern."""
        return {
            BAN_METHOD_HEADER: self.method.value,
            BAN_REGEX_HEADER: self.pattern,
        }

    def __str__(self) -> str:
        return self.pattern


BanTarget = ExactPath | RegexPattern
