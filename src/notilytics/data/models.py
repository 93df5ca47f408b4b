"""Core data models for Notilytics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """A news article supplied by the fetch layer.

    ``kincaid_grade`` and ``reading_score`` are the rounded readability
    metrics of the article text (see ``notilytics.readability.score_article``).
    """

    url: str
    title: str = ""
    source_name: str = ""
    source_url: str = ""
    published_at: str | None = None
    kincaid_grade: int = 0
    reading_score: int = 0
    description: str | None = None


@dataclass(frozen=True)
class Readability:
    """Readability metrics for a single text."""

    grade: float = 0.0
    score: float = 0.0


@dataclass(frozen=True)
class ReadabilityAverages:
    """Per-text readability metrics averaged over a corpus."""

    avg_grade: float = 0.0
    avg_score: float = 0.0


@dataclass(frozen=True)
class QueryResult:
    """The articles returned for one search query and their readability averages.

    Averages are computed over the article titles when the result is created
    and are never recomputed.
    """

    query: str
    articles: tuple[Article, ...] = ()
    avg_grade: float = 0.0
    avg_score: float = 0.0

    @property
    def titles(self) -> list[str]:
        return [a.title or "" for a in self.articles]

    @property
    def descriptions(self) -> list[str]:
        return [a.description or "" for a in self.articles]


@dataclass(frozen=True)
class SourceProfile:
    """Short profile of a news source."""

    source_name: str
    url: str = ""
    description: str = ""
