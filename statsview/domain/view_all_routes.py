"""Static route table from view type to use-case provider and screen title.

The resolver consults this registry to learn which granular factory family or
which insight use case backs a view type, and which title the screen shows.
Two pairs of view types intentionally share a granular family
(top posts / referrers, and geoviews / video plays) and differ only in title.
"""

from __future__ import annotations


from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from .entities import TitleRes
from .errors import InvalidStatsTypeError
from .stats_types import GranularFamily, InsightKind, StatsViewType


@dataclass(frozen=True)
class GranularRoute:
    """Granular view type backed by a freshly built use case of ``family``."""

    view_type: StatsViewType
    family: GranularFamily
    title: TitleRes


@dataclass(frozen=True)
class InsightRoute:
    """Insight view type backed by the shared use case declaring ``kind``."""

    view_type: StatsViewType
    kind: InsightKind
    title: TitleRes


class ViewAllRegistry:
    """Registry of granular and insight routes keyed by view type."""

    def __init__(
        self,
        granular: Iterable[GranularRoute],
        insights: Iterable[InsightRoute],
    ) -> None:
        """Index routes by view type; a view type may appear on one path only."""
        self._granular: Dict[StatsViewType, GranularRoute] = {
            route.view_type: route for route in granular
        }
        self._insights: Dict[StatsViewType, InsightRoute] = {
            route.view_type: route for route in insights
        }
        overlap = set(self._granular) & set(self._insights)
        if overlap:
            names = ", ".join(sorted(view_type.name for view_type in overlap))
            raise ValueError(f"View types routed on both paths: {names}")

    @classmethod
    def default(cls) -> "ViewAllRegistry":
        """Build the route table used by the view-all screen."""
        granular = (
            _granular(StatsViewType.TOP_POSTS_AND_PAGES, GranularFamily.POSTS_AND_PAGES, "stats_view_top_posts_and_pages"),
            _granular(StatsViewType.REFERRERS, GranularFamily.POSTS_AND_PAGES, "stats_view_referrers"),
            _granular(StatsViewType.CLICKS, GranularFamily.CLICKS, "stats_view_clicks"),
            _granular(StatsViewType.AUTHORS, GranularFamily.AUTHORS, "stats_view_authors"),
            _granular(StatsViewType.GEOVIEWS, GranularFamily.COUNTRY_VIEWS, "stats_view_countries"),
            _granular(StatsViewType.SEARCH_TERMS, GranularFamily.SEARCH_TERMS, "stats_view_search_terms"),
            _granular(StatsViewType.VIDEO_PLAYS, GranularFamily.COUNTRY_VIEWS, "stats_view_videos"),
        )
        insights = (
            _insight(StatsViewType.FOLLOWERS, InsightKind.FOLLOWERS, "stats_view_followers"),
            _insight(StatsViewType.COMMENTS, InsightKind.COMMENTS, "stats_view_comments"),
            _insight(StatsViewType.TAGS_AND_CATEGORIES, InsightKind.TAGS_AND_CATEGORIES, "stats_view_tags_and_categories"),
            _insight(StatsViewType.INSIGHTS_ALL_TIME, InsightKind.ALL_TIME, "stats_insights_all_time_stats"),
            _insight(StatsViewType.INSIGHTS_LATEST_POST_SUMMARY, InsightKind.LATEST_POST_SUMMARY, "stats_insights_latest_post_summary"),
            _insight(StatsViewType.INSIGHTS_MOST_POPULAR, InsightKind.MOST_POPULAR, "stats_insights_popular"),
            _insight(StatsViewType.INSIGHTS_TODAY, InsightKind.TODAY, "stats_insights_today"),
            _insight(StatsViewType.PUBLICIZE, InsightKind.PUBLICIZE, "stats_view_publicize"),
            _insight(StatsViewType.DETAIL_MONTHS_AND_YEARS, InsightKind.POST_MONTHS_AND_YEARS, "stats_detail_months_and_years"),
            _insight(StatsViewType.DETAIL_AVERAGE_VIEWS_PER_DAY, InsightKind.POST_AVERAGE_VIEWS_PER_DAY, "stats_detail_average_views_per_day"),
        )
        return cls(granular=granular, insights=insights)

    def granular_route(self, view_type: StatsViewType) -> GranularRoute:
        """Return the granular route for ``view_type`` or raise InvalidStatsTypeError."""
        route = self._granular.get(view_type) if isinstance(view_type, StatsViewType) else None
        if route is None:
            raise InvalidStatsTypeError(view_type, "granular")
        return route

    def insight_route(self, view_type: StatsViewType) -> InsightRoute:
        """Return the insight route for ``view_type`` or raise InvalidStatsTypeError."""
        route = self._insights.get(view_type) if isinstance(view_type, StatsViewType) else None
        if route is None:
            raise InvalidStatsTypeError(view_type, "insights")
        return route

    def is_granular(self, view_type: StatsViewType) -> bool:
        return view_type in self._granular

    def granular_view_types(self) -> Tuple[StatsViewType, ...]:
        return tuple(self._granular)

    def insight_view_types(self) -> Tuple[StatsViewType, ...]:
        return tuple(self._insights)

    def uncovered_view_types(self) -> Tuple[StatsViewType, ...]:
        """Return view types routed on neither path, in declaration order."""
        return tuple(
            view_type
            for view_type in StatsViewType
            if view_type not in self._granular and view_type not in self._insights
        )

    def titles(self) -> Mapping[StatsViewType, TitleRes]:
        """Return every routed view type with its title, granular routes first."""
        titles: Dict[StatsViewType, TitleRes] = {
            view_type: route.title for view_type, route in self._granular.items()
        }
        titles.update(
            {view_type: route.title for view_type, route in self._insights.items()}
        )
        return titles


def _granular(view_type: StatsViewType, family: GranularFamily, title: str) -> GranularRoute:
    return GranularRoute(view_type=view_type, family=family, title=TitleRes(title))


def _insight(view_type: StatsViewType, kind: InsightKind, title: str) -> InsightRoute:
    return InsightRoute(view_type=view_type, kind=kind, title=TitleRes(title))


__all__ = ["GranularRoute", "InsightRoute", "ViewAllRegistry"]
