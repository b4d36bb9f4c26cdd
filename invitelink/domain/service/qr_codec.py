"""QR payload codec.

A payload looks like ``IL1.<invite_id>.<tag>``. The tag is a truncated
base64url HMAC-SHA256 over ``IL1.<invite_id>``, so a corrupted or forged scan
is rejected before any store lookup happens.
"""

import hmac
from base64 import urlsafe_b64encode
from hashlib import sha256

import logfire

from invitelink.config import QRSettings
from invitelink.domain.error import MalformedCodeError
from invitelink.domain.value import InviteId, is_invite_id

from .base import Service

PAYLOAD_VERSION = "IL1"
SEPARATOR = "."


class QRCodec(Service):
    """Encodes invite IDs into scannable payloads and back."""

    def __init__(self, qr_settings: QRSettings) -> None:
        """Initialize codec.

        Args:
            qr_settings: Signing secret and tag length
        """
        self._key = qr_settings.signing_secret.encode("utf-8")
        self._tag_length = qr_settings.tag_length

    def encode(self, invite_id: InviteId) -> str:
        """Build the payload carried by an invite's QR code."""
        body = f"{PAYLOAD_VERSION}{SEPARATOR}{invite_id}"
        return f"{body}{SEPARATOR}{self._tag(body)}"

    def decode(self, code: str) -> InviteId:
        """Extract the invite ID from a scanned payload.

        Raises:
            MalformedCodeError: If the payload cannot be parsed or its tag
                does not match
        """
        code = (code or "").strip()
        if not code:
            raise self._reject("empty payload", code)

        parts = code.split(SEPARATOR)
        if len(parts) != 3:
            raise self._reject("unexpected payload layout", code)

        version, invite_id, tag = parts
        if version != PAYLOAD_VERSION:
            raise self._reject("unsupported payload version", code)
        if not is_invite_id(invite_id):
            raise self._reject("invalid invite identifier", code)

        expected = self._tag(f"{version}{SEPARATOR}{invite_id}")
        if not hmac.compare_digest(tag.encode("ascii", "replace"), expected.encode("ascii")):
            raise self._reject("integrity check failed", code)

        return InviteId(invite_id)

    def _tag(self, body: str) -> str:
        digest = hmac.new(self._key, body.encode("utf-8"), sha256).digest()
        return urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")[: self._tag_length]

    @staticmethod
    def _reject(reason: str, code: str) -> MalformedCodeError:
        # Only log a prefix; full payloads are bearer credentials at the door
        logfire.warn("Malformed code scanned", reason=reason, code=code[:12] + "...")
        return MalformedCodeError(reason)
