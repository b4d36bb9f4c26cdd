"""Unit tests for KeyedLock."""

import asyncio

import pytest

from invitelink.util.concurrency import KeyedLock


class TestKeyedLock:
    """Per-key serialization."""

    @pytest.mark.asyncio
    async def test_same_key_serialized(self):
        """Critical sections on one key never overlap."""
        locks = KeyedLock()
        active = 0
        peak = 0

        async def critical():
            nonlocal active, peak
            async with locks.hold("INV-1"):
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0)
                active -= 1

        await asyncio.gather(*(critical() for _ in range(5)))

        assert peak == 1

    @pytest.mark.asyncio
    async def test_different_keys_independent(self):
        """Holding one key does not block another."""
        locks = KeyedLock()

        async with locks.hold("INV-1"):
            await asyncio.wait_for(self._enter(locks, "INV-2"), timeout=1)

    @pytest.mark.asyncio
    async def test_entries_dropped_when_idle(self):
        """The table only holds keys in use."""
        locks = KeyedLock()

        async with locks.hold("INV-1"):
            assert len(locks) == 1

        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_released_on_error(self):
        """An exception inside the block still releases the key."""
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            async with locks.hold("INV-1"):
                raise RuntimeError("boom")

        assert len(locks) == 0
        await asyncio.wait_for(self._enter(locks, "INV-1"), timeout=1)

    @staticmethod
    async def _enter(locks: KeyedLock, key: str) -> None:
        async with locks.hold(key):
            pass
