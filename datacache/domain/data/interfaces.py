"""
Data Provider Interfaces

Abstract contract for data-fetching collaborators.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .models import DataResponse, SelectOptions


class DataProvider(ABC):
    """
    Abstract data provider.

    Supplies items addressed by slug and multi-item queries by schema name.
    Implementations own any timeout, retry or cancellation behaviour.
    """

    @abstractmethod
    async def get(self, slug: str) -> DataResponse:
        """Get single data item by slug (e.g. ``/home/hero`` or ``company``)."""
        pass

    @abstractmethod
    async def select(
        self, schema: str, options: Optional[SelectOptions] = None
    ) -> DataResponse:
        """Select multiple data items of a schema with query options."""
        pass
