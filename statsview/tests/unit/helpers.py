from __future__ import annotations

from typing import Optional

from statsview.adapters.stats_mock import (
    StubDateSelectorFactory,
    stub_granular_factories,
    stub_insight_use_cases,
)
from statsview.app.main import stub_dependencies
from statsview.app.view_all_factory import StatsViewAllFactoryBuilder
from statsview.usecases.resolve_view_all_use_case import ResolveViewAllUseCase


def make_resolver() -> ResolveViewAllUseCase:
    return ResolveViewAllUseCase(
        granular_factories=stub_granular_factories(),
        insight_use_cases=stub_insight_use_cases(),
    )


def make_builder(
    date_selector_factory: Optional[StubDateSelectorFactory] = None,
) -> StatsViewAllFactoryBuilder:
    deps = stub_dependencies(date_selector_factory=date_selector_factory)
    return StatsViewAllFactoryBuilder(deps)


__all__ = ["make_builder", "make_resolver"]
