"""Bounded most-recent-first list of a session's search queries."""

from collections.abc import Iterator, Sequence


def touch_history(history: Sequence[str], query: str, cap: int) -> list[str]:
    """Move ``query`` to the front of ``history``.

    The query is stripped first; a blank query leaves the history unchanged.
    Any earlier occurrence is removed and the result is truncated to ``cap``
    entries. The input sequence is not modified.

    Args:
        history: Prior queries, most recent first.
        query: The query just issued.
        cap: Maximum number of queries kept.

    Returns:
        The updated history.
    """
    query = query.strip()
    if not query:
        return list(history)[: max(cap, 0)]
    updated = [query] + [q for q in history if q != query]
    return updated[: max(cap, 0)]


class RecentQueryList:
    """Session-owned recent query list. Not thread-safe.

    Args:
        cap: Maximum number of queries kept.
        queries: Initial queries, most recent first.
    """

    def __init__(self, cap: int = 10, queries: Sequence[str] = ()) -> None:
        self._cap = cap
        self._queries: list[str] = []
        for q in reversed(queries):
            self.touch(q)

    @property
    def cap(self) -> int:
        return self._cap

    def touch(self, query: str) -> list[str]:
        """Record ``query`` as the most recent search and return the new list."""
        self._queries = touch_history(self._queries, query, self._cap)
        return self.as_list()

    def as_list(self) -> list[str]:
        return list(self._queries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._queries)

    def __len__(self) -> int:
        return len(self._queries)

    def __contains__(self, query: object) -> bool:
        return query in self._queries
