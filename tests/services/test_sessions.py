"""Tests for the session registry."""

import asyncio

import pytest

from srt_translator.exceptions import TranslationCancelledError
from srt_translator.services.sessions import SessionRegistry


async def _value_after(value, delay=0.0):
    await asyncio.sleep(delay)
    return value


@pytest.fixture
def registry():
    return SessionRegistry()


class TestSessionRegistry:
    """Tests for SessionRegistry."""

    async def test_run_without_session(self, registry):
        """Test untracked batches just run."""
        assert await registry.run(None, _value_after("done")) == "done"
        assert registry.active_sessions == []

    @pytest.mark.parametrize("session_id", ["", "   "])
    async def test_blank_session_is_untracked(self, registry, session_id):
        """Test blank session ids never supersede each other."""
        first = asyncio.create_task(registry.run(session_id, _value_after("one", delay=0.02)))
        await asyncio.sleep(0)

        second = await registry.run(session_id, _value_after("two"))

        assert second == "two"
        assert await first == "one"
        assert registry.active_sessions == []

    async def test_run_with_session_cleans_up(self, registry):
        """Test a finished batch is no longer tracked."""
        assert await registry.run("s1", _value_after("done")) == "done"
        assert registry.active_sessions == []

    async def test_new_batch_supersedes_previous(self, registry):
        """Test a second batch for a session cancels the first."""
        stale = asyncio.create_task(registry.run("s1", _value_after("stale", delay=10)))
        await asyncio.sleep(0)
        assert registry.active_sessions == ["s1"]

        fresh = await registry.run("s1", _value_after("fresh"))

        assert fresh == "fresh"
        with pytest.raises(TranslationCancelledError):
            await stale
        assert registry.active_sessions == []

    async def test_sessions_are_independent(self, registry):
        """Test batches of different sessions do not cancel each other."""
        first = asyncio.create_task(registry.run("s1", _value_after("one", delay=0.02)))
        second = asyncio.create_task(registry.run("s2", _value_after("two", delay=0.01)))

        assert await asyncio.gather(first, second) == ["one", "two"]

    async def test_cancel(self, registry):
        """Test explicit cancellation of a session's batch."""
        running = asyncio.create_task(registry.run("s1", _value_after("x", delay=10)))
        await asyncio.sleep(0)

        assert registry.cancel("s1") is True
        assert registry.cancel("unknown") is False
        with pytest.raises(TranslationCancelledError):
            await running

    async def test_cancel_all(self, registry):
        """Test every in-flight batch is cancelled."""
        tasks = [
            asyncio.create_task(registry.run(sid, _value_after(sid, delay=10)))
            for sid in ("a", "b")
        ]
        await asyncio.sleep(0)

        assert registry.cancel_all() == 2
        results = await asyncio.gather(*tasks, return_exceptions=True)
        assert all(isinstance(result, TranslationCancelledError) for result in results)

    async def test_caller_cancellation_propagates(self, registry):
        """Test cancelling the caller is not reported as a superseded batch."""
        caller = asyncio.create_task(registry.run("s1", _value_after("x", delay=10)))
        await asyncio.sleep(0)

        caller.cancel()

        with pytest.raises(asyncio.CancelledError):
            await caller
        assert registry.active_sessions == []
