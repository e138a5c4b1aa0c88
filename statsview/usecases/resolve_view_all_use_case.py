"""Use case that picks the statistics use case and title for a view-all screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from ..domain.entities import ResolvedSelection
from ..domain.errors import UseCaseNotFoundError
from ..domain.ports import GranularUseCaseFactory, InsightUseCase
from ..domain.stats_types import (
    GranularFamily,
    InsightKind,
    StatsGranularity,
    StatsViewType,
    UseCaseMode,
)
from ..domain.view_all_routes import ViewAllRegistry


@dataclass
class ResolveViewAllUseCase:
    """Resolve ``(use_case, title)`` for a view type and optional granularity.

    Granular requests build a new use case from the factory whose ``family``
    matches the route. Insight requests return the shared use case whose
    ``kind`` matches the route, without building anything. When several
    providers declare the same discriminant, the first one in the injected
    sequence wins.
    """

    granular_factories: Sequence[GranularUseCaseFactory]
    insight_use_cases: Sequence[InsightUseCase]
    registry: ViewAllRegistry = field(default_factory=ViewAllRegistry.default)

    def __post_init__(self) -> None:
        self.granular_factories = tuple(self.granular_factories)
        self.insight_use_cases = tuple(self.insight_use_cases)
        self._factories_by_family: Dict[GranularFamily, GranularUseCaseFactory] = {}
        for factory in self.granular_factories:
            self._factories_by_family.setdefault(factory.family, factory)
        self._insights_by_kind: Dict[InsightKind, InsightUseCase] = {}
        for use_case in self.insight_use_cases:
            self._insights_by_kind.setdefault(use_case.kind, use_case)

    def __call__(
        self,
        view_type: StatsViewType,
        granularity: Optional[StatsGranularity] = None,
    ) -> ResolvedSelection:
        """Return the selection for ``view_type``.

        Raises:
            InvalidStatsTypeError: ``view_type`` has no route on the path chosen
                by ``granularity`` (including unknown view types).
            UseCaseNotFoundError: the route exists but no injected provider
                declares its family or kind.
        """
        if granularity is None:
            return self._resolve_insight(view_type)
        return self._resolve_granular(view_type, granularity)

    def _resolve_granular(
        self, view_type: StatsViewType, granularity: StatsGranularity
    ) -> ResolvedSelection:
        route = self.registry.granular_route(view_type)
        factory = self._factories_by_family.get(route.family)
        if factory is None:
            raise UseCaseNotFoundError(view_type, route.family)
        use_case = factory.build(granularity, UseCaseMode.VIEW_ALL)
        return ResolvedSelection(use_case=use_case, title=route.title)

    def _resolve_insight(self, view_type: StatsViewType) -> ResolvedSelection:
        route = self.registry.insight_route(view_type)
        use_case = self._insights_by_kind.get(route.kind)
        if use_case is None:
            raise UseCaseNotFoundError(view_type, route.kind)
        return ResolvedSelection(use_case=use_case, title=route.title)


__all__ = ["ResolveViewAllUseCase"]
