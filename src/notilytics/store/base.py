"""Protocol for query result storage."""

from typing import Protocol

from notilytics.data import QueryResult


class ResultStore(Protocol):
    """Interface for holding one QueryResult per distinct query string."""

    def get(self, query: str) -> QueryResult | None:
        """Return the stored result for ``query``, or None."""
        ...

    def put(self, result: QueryResult) -> None:
        """Store ``result`` under ``result.query``, replacing any previous entry."""
        ...

    def queries(self) -> list[str]:
        """Stored query strings in iteration order."""
        ...

    def __contains__(self, query: object) -> bool: ...

    def __len__(self) -> int: ...
