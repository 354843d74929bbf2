"""Cooperative cancellation for catalog enumeration."""

from collections.abc import Awaitable, Callable


class ListingCancelled(Exception):
    """Raised when a listing is cancelled before enumeration completes."""
    pass


class CancellationToken:
    """Per-request cancellation signal, checked between enumeration steps.

    The token fires either when `cancel()` is called or when the optional
    probe reports that the caller went away (e.g. a client disconnect).
    """

    def __init__(
        self,
        probe: Callable[[], Awaitable[bool]] | None = None,
    ) -> None:
        """
        Args:
            probe: async callable returning True once the request is gone
        """
        self._probe = probe
        self._cancelled = False

    def cancel(self) -> None:
        """Fire the token."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        """Whether the token has fired (without consulting the probe)."""
        return self._cancelled

    async def is_cancelled(self) -> bool:
        """Check the token, consulting the probe if it has not fired yet."""
        if not self._cancelled and self._probe is not None:
            if await self._probe():
                self._cancelled = True
        return self._cancelled

    async def raise_if_cancelled(self) -> None:
        if await self.is_cancelled():
            raise ListingCancelled("agent listing was cancelled")
