"""Domain services."""

from .base import Service
from .checkin_coordinator import CheckInCoordinator, CheckInResult
from .invite_store import InviteStore, Mutator
from .qr_codec import QRCodec
from .rsvp_processor import RsvpConfirmation, RsvpProcessor

__all__ = [
    "CheckInCoordinator",
    "CheckInResult",
    "InviteStore",
    "Mutator",
    "QRCodec",
    "RsvpConfirmation",
    "RsvpProcessor",
    "Service",
]
