"""Closed enumerations shared by the route table, use cases, and view models.

Every statistics screen the app can open in "view all" mode is named by a
:class:`StatsViewType`. Granular screens additionally need a
:class:`StatsGranularity`; insight screens are requested without one.
"""

from __future__ import annotations

from enum import Enum


class StatsViewType(Enum):
    """Identifier of a single statistics screen."""

    TOP_POSTS_AND_PAGES = "top_posts_and_pages"
    REFERRERS = "referrers"
    CLICKS = "clicks"
    AUTHORS = "authors"
    GEOVIEWS = "geoviews"
    SEARCH_TERMS = "search_terms"
    VIDEO_PLAYS = "video_plays"
    FOLLOWERS = "followers"
    COMMENTS = "comments"
    TAGS_AND_CATEGORIES = "tags_and_categories"
    INSIGHTS_ALL_TIME = "insights_all_time"
    INSIGHTS_LATEST_POST_SUMMARY = "insights_latest_post_summary"
    INSIGHTS_MOST_POPULAR = "insights_most_popular"
    INSIGHTS_TODAY = "insights_today"
    PUBLICIZE = "publicize"
    DETAIL_MONTHS_AND_YEARS = "detail_months_and_years"
    DETAIL_AVERAGE_VIEWS_PER_DAY = "detail_average_views_per_day"

    @classmethod
    def parse(cls, token: str) -> "StatsViewType":
        """Parse an enum name or value, case-insensitive."""
        text = str(token or "").strip()
        for member in cls:
            if text.upper() == member.name or text.lower() == member.value:
                return member
        raise ValueError(f"Unknown stats view type: {token}")


class StatsGranularity(Enum):
    """Time bucket for granular screens."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def parse(cls, token: str) -> "StatsGranularity":
        text = str(token or "").strip()
        for member in cls:
            if text.upper() == member.name or text.lower() == member.value:
                return member
        raise ValueError(f"Unknown stats granularity: {token}")


class StatsSection(Enum):
    """Tab of the stats screen a date selector is bound to."""

    INSIGHTS = "insights"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def from_granularity(cls, granularity: StatsGranularity) -> "StatsSection":
        """Return the section that shows data bucketed by ``granularity``."""
        return _SECTION_BY_GRANULARITY[granularity]


_SECTION_BY_GRANULARITY = {
    StatsGranularity.DAYS: StatsSection.DAYS,
    StatsGranularity.WEEKS: StatsSection.WEEKS,
    StatsGranularity.MONTHS: StatsSection.MONTHS,
    StatsGranularity.YEARS: StatsSection.YEARS,
}


class UseCaseMode(Enum):
    """How a use case presents its list. The view-all screen always asks for the full list."""

    VIEW_ALL = "view_all"


class GranularFamily(Enum):
    """Discriminant declared by each granular use-case factory.

    Several view types may share one family; the route table tells them apart
    by title.
    """

    POSTS_AND_PAGES = "posts_and_pages"
    CLICKS = "clicks"
    AUTHORS = "authors"
    COUNTRY_VIEWS = "country_views"
    SEARCH_TERMS = "search_terms"


class InsightKind(Enum):
    """Discriminant declared by each pre-built insight use case."""

    FOLLOWERS = "followers"
    COMMENTS = "comments"
    TAGS_AND_CATEGORIES = "tags_and_categories"
    ALL_TIME = "all_time"
    LATEST_POST_SUMMARY = "latest_post_summary"
    MOST_POPULAR = "most_popular"
    TODAY = "today"
    PUBLICIZE = "publicize"
    POST_MONTHS_AND_YEARS = "post_months_and_years"
    POST_AVERAGE_VIEWS_PER_DAY = "post_average_views_per_day"


__all__ = [
    "GranularFamily",
    "InsightKind",
    "StatsGranularity",
    "StatsSection",
    "StatsViewType",
    "UseCaseMode",
]
