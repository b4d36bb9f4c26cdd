"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are frozen snapshots: a state change builds a new instance
    instead of mutating the stored one.
    """

    model_config = ConfigDict(frozen=True)
