"""News source profiles built from a source's recent articles."""

from collections.abc import Sequence

from notilytics.data import Article, SourceProfile

NO_ARTICLES_MESSAGE = "No Articles Found for this source at this time. Please try again later!"

# Articles listed on a source profile page.
DEFAULT_PROFILE_LIMIT = 50


def build_source_profile(
    source_name: str, articles: Sequence[Article], limit: int = DEFAULT_PROFILE_LIMIT
) -> tuple[SourceProfile, list[Article]]:
    """Build a profile for ``source_name`` and pick the articles to list.

    Args:
        source_name: Display name of the source.
        articles: The source's articles, most recent first.
        limit: Maximum number of articles to list.

    Returns:
        Tuple of (profile, listed articles). The profile URL comes from the
        first article's ``source_url``.
    """
    if not articles:
        return (SourceProfile(source_name=source_name, description=NO_ARTICLES_MESSAGE), [])

    listed = list(articles[: max(limit, 0)])
    url = listed[0].source_url if listed else ""
    profile = SourceProfile(
        source_name=source_name,
        url=url,
        description=f"Listing Articles from {source_name}.",
    )
    return (profile, listed)
