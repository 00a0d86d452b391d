from typing import Any, Dict, Hashable, Optional, Tuple

QueryKey = Tuple[Hashable, ...]


class QueryCache:
    """
    Results of client reads keyed by query key.

    Entries never go stale on their own; a mutation invalidates the keys
    it affects and the next read refetches.
    """

    def __init__(self):
        self._entries: Dict[QueryKey, Any] = {}

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: QueryKey, default: Optional[Any] = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, key: QueryKey, exact: bool = True) -> int:
        """
        Drop ``key``, or with ``exact=False`` every key that starts with it.

        Returns the number of entries dropped.
        """
        if exact:
            if key not in self._entries:
                return 0
            del self._entries[key]
            return 1

        matches = [k for k in self._entries if k[: len(key)] == key]
        for k in matches:
            del self._entries[k]
        return len(matches)

    def remove(self, key: QueryKey) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
