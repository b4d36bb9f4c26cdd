"""QR image rendering."""

from .image import render_qr_png

__all__ = ["render_qr_png"]
