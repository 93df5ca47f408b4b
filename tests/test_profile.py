"""Tests for source profiles."""

from notilytics.data import Article, SourceProfile
from notilytics.profile import DEFAULT_PROFILE_LIMIT, NO_ARTICLES_MESSAGE, build_source_profile


def _article(i: int) -> Article:
    return Article(
        url=f"https://bbc.com/news/{i}",
        title=f"Story {i}",
        source_name="BBC News",
        source_url="https://bbc.com",
    )


def test_profile_without_articles() -> None:
    profile, listed = build_source_profile("BBC News", [])
    assert profile == SourceProfile(source_name="BBC News", url="", description=NO_ARTICLES_MESSAGE)
    assert listed == []


def test_profile_from_articles() -> None:
    articles = [_article(i) for i in range(3)]
    profile, listed = build_source_profile("BBC News", articles)
    assert profile.url == "https://bbc.com"
    assert profile.description == "Listing Articles from BBC News."
    assert listed == articles


def test_profile_limits_listed_articles() -> None:
    articles = [_article(i) for i in range(20)]
    _, listed = build_source_profile("BBC News", articles, limit=10)
    assert len(listed) == 10
    assert listed[0].url == "https://bbc.com/news/0"


def test_profile_lists_fifty_articles_by_default() -> None:
    articles = [_article(i) for i in range(60)]
    _, listed = build_source_profile("BBC News", articles)
    assert len(listed) == DEFAULT_PROFILE_LIMIT == 50
