"""In-memory stand-ins for the stats collaborators.

Used by tests, the command-line entry point, and offline development. The stubs
record how they were called so assembly can be inspected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..domain.ports import (
    GranularUseCaseFactory,
    StatsDateSelector,
    StatsDateSelectorFactory,
    StatsSiteProvider,
)
from ..domain.stats_types import (
    GranularFamily,
    InsightKind,
    StatsGranularity,
    StatsSection,
    UseCaseMode,
)


@dataclass
class StubStatsUseCase:
    """Granular use case produced by :class:`StubGranularUseCaseFactory`."""

    family: GranularFamily
    granularity: StatsGranularity
    mode: UseCaseMode

    def __str__(self) -> str:
        return f"{self.family.name}/{self.granularity.name}/{self.mode.name}"


@dataclass(eq=False)
class StubInsightUseCase:
    """Shared insight use case; compared by identity."""

    kind: InsightKind

    def __str__(self) -> str:
        return self.kind.name


@dataclass
class StubGranularUseCaseFactory(GranularUseCaseFactory):
    """Builds :class:`StubStatsUseCase` objects and remembers every call."""

    family: GranularFamily
    calls: List[Tuple[StatsGranularity, UseCaseMode]] = field(default_factory=list)

    def build(self, granularity: StatsGranularity, mode: UseCaseMode) -> StubStatsUseCase:
        self.calls.append((granularity, mode))
        return StubStatsUseCase(family=self.family, granularity=granularity, mode=mode)


@dataclass
class StubSiteProvider(StatsSiteProvider):
    site_id: int = 1


@dataclass(eq=False)
class StubDateSelector(StatsDateSelector):
    section: StatsSection


@dataclass
class StubDateSelectorFactory(StatsDateSelectorFactory):
    """Builds :class:`StubDateSelector` objects and records requested sections."""

    sections: List[StatsSection] = field(default_factory=list)

    def build(self, section: StatsSection) -> StubDateSelector:
        self.sections.append(section)
        return StubDateSelector(section=section)


def stub_granular_factories() -> List[StubGranularUseCaseFactory]:
    """One stub factory per granular family, in declaration order."""
    return [StubGranularUseCaseFactory(family=family) for family in GranularFamily]


def stub_insight_use_cases() -> List[StubInsightUseCase]:
    """One stub use case per insight kind, in declaration order."""
    return [StubInsightUseCase(kind=kind) for kind in InsightKind]


__all__ = [
    "StubDateSelector",
    "StubDateSelectorFactory",
    "StubGranularUseCaseFactory",
    "StubInsightUseCase",
    "StubSiteProvider",
    "StubStatsUseCase",
    "stub_granular_factories",
    "stub_insight_use_cases",
]
