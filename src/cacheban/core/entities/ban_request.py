"""Ban request value object."""

from dataclasses import dataclass, field

from cacheban.core.entities.ban_target import BanTarget


@dataclass(frozen=True)
class BanRequest:
    """A single purge request addressed to the cache server."""

    method: str
    url: str
    target: BanTarget
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def for_target(
        cls,
        url: str,
        target: BanTarget,
        method: str = "BAN",
    ) -> "BanRequest":
        """Build the request that bans ``target`` on the server at ``url``.

        Args:
            url: The resolved cache server base URL.
            target: The exact path or pattern to ban.
            method: HTTP verb understood by the cache server's VCL.

        Returns:
            A new BanRequest instance.
        """
        return cls(
            method=method,
            url=url,
            target=target,
            headers=target.to_headers(),
        )
