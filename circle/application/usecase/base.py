"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: authorize, call domain services, shape a response.

    Use cases raise ``DomainError`` subclasses; the HTTP layer maps them.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
