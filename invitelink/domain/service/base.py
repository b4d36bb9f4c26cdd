"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services own the invite lifecycle rules; they raise ``DomainError``
    subclasses and never talk to transports.
    """
