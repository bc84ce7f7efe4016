"""Per-session tracking of in-flight translation batches.

A client that starts a new batch under the same session id supersedes its
previous one: the stale batch is cancelled and its request fails with
``TranslationCancelledError``. Requests without a session id never
interfere with each other.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from srt_translator.core.logging import get_logger
from srt_translator.exceptions import TranslationCancelledError

logger = get_logger(__name__)

T = TypeVar("T")


class SessionRegistry:
    """Maps session ids to the batch currently running for them."""

    def __init__(self):
        self._batches: dict[str, asyncio.Task] = {}
        self._superseded: set[asyncio.Task] = set()

    @property
    def active_sessions(self) -> list[str]:
        return [sid for sid, task in self._batches.items() if not task.done()]

    def cancel(self, session_id: str) -> bool:
        """Cancel the in-flight batch of a session.

        Returns:
            True if a running batch was cancelled
        """
        task = self._batches.get(session_id)
        if task is None or task.done():
            return False

        logger.info("Cancelling in-flight batch for session %s", session_id)
        self._superseded.add(task)
        task.cancel()
        return True

    def cancel_all(self) -> int:
        """Cancel every in-flight batch, returning how many were cancelled."""
        return sum(self.cancel(session_id) for session_id in list(self._batches))

    async def run(self, session_id: str | None, batch: Awaitable[T]) -> T:
        """Run a batch, superseding any earlier batch of the same session.

        Args:
            session_id: Client session id; None or blank runs an untracked batch
            batch: Awaitable performing the translation

        Returns:
            The batch result

        Raises:
            TranslationCancelledError: If a newer batch superseded this one
        """
        if not session_id or not session_id.strip():
            return await batch

        self.cancel(session_id)
        task = asyncio.ensure_future(batch)
        self._batches[session_id] = task
        try:
            return await task
        except asyncio.CancelledError:
            if task in self._superseded:
                raise TranslationCancelledError(
                    "Translation was superseded by a newer request for this session"
                ) from None
            raise
        finally:
            self._superseded.discard(task)
            if self._batches.get(session_id) is task:
                del self._batches[session_id]


# Global registry instance
session_registry = SessionRegistry()
