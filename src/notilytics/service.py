"""Search recording and reconstruction of a session's visible results."""

import logging
from collections.abc import Iterable, Sequence

from notilytics.data import Article, QueryResult
from notilytics.history import RecentQueryList
from notilytics.readability import average_readability
from notilytics.stats import DEFAULT_MIN_LENGTH, stats_summary
from notilytics.store import ResultStore

logger = logging.getLogger(__name__)


def record_search(store: ResultStore, query: str, articles: Iterable[Article]) -> QueryResult:
    """Compute title readability averages for a search and store the result.

    A repeated query replaces the previously stored result.

    Args:
        store: Store to write to.
        query: Search query; surrounding whitespace is stripped.
        articles: Articles returned for the query, in display order.

    Returns:
        The stored QueryResult.

    Raises:
        ValueError: If the query is blank.
    """
    query = query.strip()
    if not query:
        msg = "Search query must not be blank"
        raise ValueError(msg)

    articles = tuple(articles)
    averages = average_readability([a.title or "" for a in articles])
    result = QueryResult(
        query=query,
        articles=articles,
        avg_grade=averages.avg_grade,
        avg_score=averages.avg_score,
    )
    store.put(result)
    logger.info(
        f"Recorded {len(articles)} articles for '{query}' "
        f"(grade={result.avg_grade:.2f}, score={result.avg_score:.2f})"
    )
    return result


def visible_results(
    store: ResultStore, history: Iterable[str], cap: int
) -> dict[str, QueryResult]:
    """Rebuild the visible results for a history purely from store lookups.

    At most ``cap`` history entries are considered, whether or not they are
    still stored. Queries missing from the store are skipped.

    Args:
        store: Store to read from.
        history: Queries, most recent first.
        cap: Maximum number of history entries to consider.

    Returns:
        Mapping of query to stored result, in history order.
    """
    results: dict[str, QueryResult] = {}
    for considered, query in enumerate(history):
        if considered >= cap:
            break
        result = store.get(query)
        if result is not None:
            results[query] = result
    return results


class SearchService:
    """Library entry point bound to one result store.

    Args:
        store: Shared result store.
        history_cap: Cap for session histories and visible results.
        min_token_length: Shortest word kept in word-frequency statistics.
    """

    def __init__(
        self,
        store: ResultStore,
        *,
        history_cap: int = 10,
        min_token_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        self._store = store
        self._history_cap = history_cap
        self._min_token_length = min_token_length

    @property
    def store(self) -> ResultStore:
        return self._store

    @property
    def history_cap(self) -> int:
        return self._history_cap

    def new_history(self, queries: Sequence[str] = ()) -> RecentQueryList:
        """Create a session history using this service's cap."""
        return RecentQueryList(cap=self._history_cap, queries=queries)

    def record_search(self, query: str, articles: Iterable[Article]) -> QueryResult:
        return record_search(self._store, query, articles)

    def get_visible_results(
        self, history: Iterable[str], cap: int | None = None
    ) -> dict[str, QueryResult]:
        return visible_results(self._store, history, self._history_cap if cap is None else cap)

    def search(
        self, history: RecentQueryList, query: str, articles: Iterable[Article]
    ) -> dict[str, QueryResult]:
        """Record a search, move it to the front of ``history`` and return the visible results.

        Args:
            history: The caller's session history; updated in place.
            query: Search query.
            articles: Articles returned for the query.

        Returns:
            Visible results for the updated history, most recent first.
        """
        result = self.record_search(query, articles)
        history.touch(result.query)
        return self.get_visible_results(history, history.cap)

    def word_frequency(self, query: str) -> str | None:
        """Word statistics for a stored query, or None if it was never recorded."""
        result = self._store.get(query.strip())
        if result is None:
            return None
        return stats_summary(result, min_length=self._min_token_length)
