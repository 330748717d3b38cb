"""Feed use cases."""

from .assemble_feed import (
    AssembleFeedRequest,
    AssembleFeedResponse,
    AssembleFeedUseCase,
)
from .list_media import ListMediaRequest, ListMediaResponse, ListMediaUseCase

__all__ = [
    "AssembleFeedRequest",
    "AssembleFeedResponse",
    "AssembleFeedUseCase",
    "ListMediaRequest",
    "ListMediaResponse",
    "ListMediaUseCase",
]
