"""Unit tests for the per-request transaction scope."""

import pytest

from invitelink.domain.error import AlreadyCheckedInError
from invitelink.persistence.database import session_scope


class RecordingSession:
    """Stands in for AsyncSession; records how the transaction ended."""

    def __init__(self):
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.calls.append("close")

    async def commit(self):
        self.calls.append("commit")

    async def rollback(self):
        self.calls.append("rollback")


class TestSessionScope:
    """One transaction per request."""

    @pytest.mark.asyncio
    async def test_commits_on_success(self):
        session = RecordingSession()

        async with session_scope(lambda: session) as yielded:
            assert yielded is session

        assert session.calls == ["commit", "close"]

    @pytest.mark.asyncio
    async def test_rejected_scan_rolls_back(self):
        """Domain errors release the row lock without committing."""
        session = RecordingSession()

        with pytest.raises(AlreadyCheckedInError):
            async with session_scope(lambda: session):
                raise AlreadyCheckedInError("INV-1", "Ada Lovelace")

        assert session.calls == ["rollback", "close"]
