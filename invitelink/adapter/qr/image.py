"""Render QR payloads as PNG images."""

import io

import qrcode
from qrcode.exceptions import DataOverflowError

from invitelink.adapter.error import RenderError


def render_qr_png(payload: str, box_size: int = 10, border: int = 4) -> bytes:
    """Render ``payload`` as a black-on-white PNG.

    Args:
        payload: Text to encode (the signed invite payload)
        box_size: Pixels per module
        border: Quiet zone width in modules

    Returns:
        PNG bytes

    Raises:
        RenderError: If the payload does not fit in a QR symbol
    """
    qr = qrcode.QRCode(
        version=None,  # Smallest symbol that fits
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        # qrcode 8 reports "no version fits" as an invalid version ValueError
        raise RenderError(f"Payload too large for a QR code: {e}") from e

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
