"""In-process query result stores.

Both stores serialize writes with a per-instance lock so a single store can be
shared by concurrent request handlers. Keys are exact, case-sensitive query
strings.
"""

import logging
import threading
from collections import OrderedDict

from notilytics.data import QueryResult

logger = logging.getLogger(__name__)


class InMemoryResultStore:
    """Unbounded, insertion-ordered result store.

    Re-recording a query replaces its value but keeps the key's original
    position. Entries are never evicted.
    """

    def __init__(self) -> None:
        self._results: dict[str, QueryResult] = {}
        self._lock = threading.Lock()

    def get(self, query: str) -> QueryResult | None:
        return self._results.get(query)

    def put(self, result: QueryResult) -> None:
        with self._lock:
            if result.query in self._results:
                logger.debug(f"Overwriting stored result for '{result.query}'")
            self._results[result.query] = result

    def queries(self) -> list[str]:
        return list(self._results)

    def __contains__(self, query: object) -> bool:
        return query in self._results

    def __len__(self) -> int:
        return len(self._results)


class LRUResultStore:
    """Result store that evicts the least recently used query past ``capacity``.

    Both ``get`` and ``put`` count as a use. ``queries()`` lists entries from
    least to most recently used.

    Args:
        capacity: Maximum number of stored results.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            msg = f"capacity must be at least 1, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._results: OrderedDict[str, QueryResult] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, query: str) -> QueryResult | None:
        with self._lock:
            result = self._results.get(query)
            if result is not None:
                self._results.move_to_end(query)
            return result

    def put(self, result: QueryResult) -> None:
        with self._lock:
            self._results[result.query] = result
            self._results.move_to_end(result.query)
            while len(self._results) > self._capacity:
                evicted, _ = self._results.popitem(last=False)
                logger.info(f"Evicted stored result for '{evicted}'")

    def queries(self) -> list[str]:
        with self._lock:
            return list(self._results)

    def __contains__(self, query: object) -> bool:
        return query in self._results

    def __len__(self) -> int:
        return len(self._results)
