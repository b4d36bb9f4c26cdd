"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class RenderError(AdapterError):
    """Raised when an image cannot be produced for a payload."""

    pass
