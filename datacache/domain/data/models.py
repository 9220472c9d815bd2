"""
Data Provider Models

Envelope and query models exchanged with data providers.
"""

import json
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(str, Enum):
    """Sort direction for select queries."""

    ASC = "asc"
    DESC = "desc"
    NONE = "none"


class SelectOptions(BaseModel):
    """Query options for multi-item selects."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    offset: Optional[int] = Field(None, ge=0, description="Items to skip")
    limit: Optional[int] = Field(None, ge=1, description="Maximum items to return")
    sort: Optional[SortOrder] = Field(None, description="Sort direction")
    order_by: Optional[str] = Field(
        None, alias="orderBy", description="Dotted path of the sort field"
    )
    filters: Optional[Dict[str, Any]] = Field(
        None, description="Exact-match filters keyed by dotted path"
    )

    def cache_fragment(self) -> str:
        """Canonical JSON form used inside cache keys.

        Unset options are dropped and keys are sorted, so equal option sets
        always serialize identically. No options at all serialize to ``{}``.
        """
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)


class ResponseMeta(BaseModel):
    """Metadata describing a data response."""

    model_config = ConfigDict(populate_by_name=True)

    schema_name: str = Field(..., alias="schema", description="Schema/model name")
    version: str = Field(..., description="Data version")
    slug: Optional[str] = Field(None, description="Slug of a single item")
    total: Optional[int] = Field(None, ge=0, description="Matches before paging")
    offset: Optional[int] = Field(None, ge=0, description="Applied offset")
    limit: Optional[int] = Field(None, ge=0, description="Applied limit")


class DataResponse(BaseModel):
    """Standardized data response wrapper."""

    data: Any = Field(None, description="Payload, absent when nothing was found")
    loading: Optional[bool] = Field(None, description="Whether data is still loading")
    error: Optional[str] = Field(None, description="Error message, if any")
    cached: Optional[bool] = Field(None, description="Whether data came from cache")
    meta: Optional[ResponseMeta] = Field(None, description="Response metadata")

    def with_cache_flag(self, cached: bool, data: Any = None) -> "DataResponse":
        """Copy of this response with the cache flag (and optionally data) set."""
        update: Dict[str, Any] = {"cached": cached}
        if data is not None:
            update["data"] = data
        return self.model_copy(update=update)
