"""
JSON Data Provider

Data provider serving items from an in-memory JSON-like document.
Useful for development, testing and static content.
"""

import json
import re
from typing import Any, Dict, List, Optional, Tuple

import structlog

from ...constants import JSON_PROVIDER_DATA_VERSION
from ...domain.data.interfaces import DataProvider
from ...domain.data.models import DataResponse, ResponseMeta, SelectOptions, SortOrder

logger = structlog.get_logger(__name__)

_PATH_SEPARATOR = re.compile(r"[/.]")
_MISSING = object()


def _sort_key(value: Any) -> Tuple[int, Any]:
    """Order values of mixed types: numbers, then strings, then the rest."""
    if isinstance(value, (int, float)):
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    return (2, json.dumps(value, sort_keys=True, default=str))


def expand_dotted_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert dotted keys into nested dictionaries.

    ``{"company.tagline": {...}}`` becomes ``{"company": {"tagline": {...}}}``.
    Nested dictionaries are expanded recursively; lists are left untouched.
    """
    result: Dict[str, Any] = {}

    for key, value in data.items():
        if "." in key:
            *parents, leaf = key.split(".")
            current = result
            for part in parents:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[leaf] = value
        elif isinstance(value, dict):
            result[key] = expand_dotted_keys(value)
        else:
            result[key] = value

    return result


def resolve_path(source: Any, path: str) -> Any:
    """
    Resolve a slash or dot separated path inside a document.

    A leading slash is ignored and numeric parts index into lists.
    Returns the module-level missing sentinel when the path does not exist.
    """
    parts = _PATH_SEPARATOR.split(path[1:] if path.startswith("/") else path)
    current = source

    for part in parts:
        if isinstance(current, list) and part.isdigit():
            index = int(part)
            if index >= len(current):
                return _MISSING
            current = current[index]
        elif isinstance(current, dict):
            if part not in current:
                return _MISSING
            current = current[part]
        else:
            return _MISSING

    return current


class JsonDataProvider(DataProvider):
    """
    JSON-backed data provider.

    ``get`` addresses items by path (``"company"``, ``"/home/hero"``,
    ``"products.1"``). ``select`` returns the list stored under the schema
    name plus every nested object whose ``modelName`` or ``schema`` field
    equals the schema name.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = self._normalize(data or {})

    @staticmethod
    def _normalize(data: Dict[str, Any]) -> Dict[str, Any]:
        if isinstance(data.get("data"), dict):
            data = data["data"]
        return expand_dotted_keys(data)

    def update_data(self, data: Dict[str, Any]) -> None:
        """Replace the data source."""
        self._data = self._normalize(data)
        logger.debug("JSON data provider source replaced", keys=len(self._data))

    async def get(self, slug: str) -> DataResponse:
        """Get single data item by slug."""
        value = resolve_path(self._data, slug)

        if value is _MISSING or value is None:
            return DataResponse(data=None)

        if isinstance(value, list):
            value = value[0] if value else None

        return DataResponse(
            data=value,
            cached=False,
            meta=ResponseMeta(
                schema_name=self._infer_schema_name(slug),
                version=JSON_PROVIDER_DATA_VERSION,
                slug=slug,
            ),
        )

    async def select(
        self, schema: str, options: Optional[SelectOptions] = None
    ) -> DataResponse:
        """Select multiple data items with query options."""
        options = options or SelectOptions()
        items = self._find_items_by_schema(schema)

        if options.filters:
            items = self._apply_filters(items, options.filters)

        if options.sort in (SortOrder.ASC, SortOrder.DESC) and options.order_by:
            items = self._apply_sorting(items, options.order_by, options.sort)

        total = len(items)
        offset = options.offset or 0
        limit = options.limit or total
        page = items[offset : offset + limit]

        return DataResponse(
            data=page,
            cached=False,
            meta=ResponseMeta(
                schema_name=schema,
                version=JSON_PROVIDER_DATA_VERSION,
                total=total,
                offset=offset,
                limit=min(limit, len(page)),
            ),
        )

    def _find_items_by_schema(self, schema: str) -> List[Any]:
        items: List[Any] = []

        direct = self._data.get(schema)
        if isinstance(direct, list):
            items.extend(direct)

        self._collect_schema_items(self._data, schema, items)
        return items

    def _collect_schema_items(self, node: Any, schema: str, results: List[Any]) -> None:
        if isinstance(node, list):
            for item in node:
                self._collect_schema_items(item, schema, results)
        elif isinstance(node, dict):
            if node.get("modelName") == schema or node.get("schema") == schema:
                results.append(node)
            for value in node.values():
                self._collect_schema_items(value, schema, results)

    @staticmethod
    def _apply_filters(items: List[Any], filters: Dict[str, Any]) -> List[Any]:
        return [
            item
            for item in items
            if all(resolve_path(item, path) == value for path, value in filters.items())
        ]

    @staticmethod
    def _apply_sorting(items: List[Any], order_by: str, sort: SortOrder) -> List[Any]:
        # Items missing the sort field, or holding null there, go last
        # regardless of direction.
        present = []
        missing = []
        for item in items:
            value = resolve_path(item, order_by)
            if value is _MISSING or value is None:
                missing.append(item)
            else:
                present.append((_sort_key(value), item))

        present.sort(key=lambda pair: pair[0], reverse=sort == SortOrder.DESC)
        return [item for _, item in present] + missing

    @staticmethod
    def _infer_schema_name(slug: str) -> str:
        parts = (slug[1:] if slug.startswith("/") else slug).split("/")
        return parts[0] or "unknown"
