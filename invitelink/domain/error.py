"""Domain layer errors.

Every rejection carries a machine-readable ``kind`` so callers (door-side UI,
API clients) can branch on the exact condition instead of a generic failure.
None of these are transient: they are caller-input or state-conflict errors
and must not be retried.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Discriminator for domain errors."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    MALFORMED_CODE = "malformed_code"
    ALREADY_SUBMITTED = "already_submitted"
    NOT_ACCEPTED = "not_accepted"
    ALREADY_CHECKED_IN = "already_checked_in"
    INVALID_PLUS_ONE_INDEX = "invalid_plus_one_index"
    CAPACITY_EXCEEDED = "capacity_exceeded"


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(DomainError):
    """Raised when a request carries missing or out-of-range values."""

    kind = ErrorKind.INVALID_INPUT


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class MalformedCodeError(DomainError):
    """Raised when a scanned code cannot be parsed or fails its integrity tag."""

    kind = ErrorKind.MALFORMED_CODE

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid code: {reason}")


class AlreadySubmittedError(DomainError):
    """Raised on a second RSVP for the same invite."""

    kind = ErrorKind.ALREADY_SUBMITTED

    def __init__(self, invite_id: str, status: str):
        self.invite_id = invite_id
        super().__init__(f"RSVP already submitted for invite {invite_id} ({status})")


class NotAcceptedError(DomainError):
    """Raised when check-in is attempted for an invite that did not accept."""

    kind = ErrorKind.NOT_ACCEPTED

    def __init__(self, invite_id: str, status: str):
        self.invite_id = invite_id
        super().__init__(
            f"Invite {invite_id} has not accepted (RSVP status: {status})"
        )


class AlreadyCheckedInError(DomainError):
    """Raised when the same person is admitted twice."""

    kind = ErrorKind.ALREADY_CHECKED_IN

    def __init__(self, invite_id: str, who: str):
        self.invite_id = invite_id
        super().__init__(f"{who} already checked in for invite {invite_id}")


class InvalidPlusOneIndexError(DomainError):
    """Raised when a plus-one slot does not exist on the invite."""

    kind = ErrorKind.INVALID_PLUS_ONE_INDEX

    def __init__(self, invite_id: str, index: int, size: int):
        self.invite_id = invite_id
        self.index = index
        super().__init__(
            f"Plus-one index {index} out of range for invite {invite_id} "
            f"({size} plus-ones)"
        )


class CapacityExceededError(DomainError):
    """Raised when plus-ones would exceed what the invite allows."""

    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, invite_id: str, requested: int, allowed: int):
        self.invite_id = invite_id
        self.requested = requested
        self.allowed = allowed
        super().__init__(
            f"Invite {invite_id} allows {allowed} plus-ones, got {requested}"
        )
