"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One invite lifecycle operation: validated request in, response out.

    Use cases sequence domain services and never catch domain errors; the
    interface layer maps those to transport responses.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT: ...
