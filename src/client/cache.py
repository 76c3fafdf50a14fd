from collections.abc import Awaitable, Callable
from typing import Any

QueryKey = tuple[str, ...]


class QueryCache:
    """Per-session store of fetched query results, keyed by tuples."""

    def __init__(self) -> None:
        self._entries: dict[QueryKey, Any] = {}

    def get(self, key: QueryKey) -> Any | None:
        return self._entries.get(key)

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[key] = value

    async def get_or_fetch(self, key: QueryKey, fetch: Callable[[], Awaitable[Any]]) -> Any:
        if key not in self._entries:
            self._entries[key] = await fetch()
        return self._entries[key]

    def invalidate(self, prefix: QueryKey = ()) -> None:
        """Drop every entry whose key starts with ``prefix``."""
        for key in [k for k in self._entries if k[: len(prefix)] == prefix]:
            del self._entries[key]

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
