"""Unit tests for domain error to HTTP status mapping."""

import pytest

from invitelink.domain.error import (
    AlreadyCheckedInError,
    AlreadySubmittedError,
    CapacityExceededError,
    ErrorKind,
    InvalidInputError,
    InvalidPlusOneIndexError,
    MalformedCodeError,
    NotAcceptedError,
    NotFoundError,
)
from invitelink.interface.error import ERROR_STATUS, status_for


class TestErrorStatus:
    """Each error kind maps to one HTTP status."""

    def test_every_kind_mapped(self):
        """No error kind falls through to the default."""
        assert set(ERROR_STATUS) == set(ErrorKind)

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (InvalidInputError("bad"), 422),
            (NotFoundError("Invite", "INV-X"), 404),
            (MalformedCodeError("integrity check failed"), 400),
            (AlreadySubmittedError("INV-X", "accepted"), 409),
            (NotAcceptedError("INV-X", "pending"), 409),
            (AlreadyCheckedInError("INV-X", "Ada"), 409),
            (InvalidPlusOneIndexError("INV-X", 3, 1), 422),
            (CapacityExceededError("INV-X", 3, 2), 409),
        ],
    )
    def test_status(self, error, status_code):
        assert status_for(error) == status_code
