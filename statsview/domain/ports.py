from __future__ import annotations
from typing import Any, Protocol

from .stats_types import (
    GranularFamily,
    InsightKind,
    StatsGranularity,
    StatsSection,
    UseCaseMode,
)

# Scheduling handles are opaque here; the view model hands them to whatever
# runs its loads.
Dispatcher = Any


# ---- Use cases ----
class StatsUseCase(Protocol):
    """Loads and caches the data of one statistics block (opaque to this package)."""


class GranularUseCaseFactory(Protocol):
    """Builds a fresh granular use case. ``family`` tells factories apart."""

    family: GranularFamily

    def build(self, granularity: StatsGranularity, mode: UseCaseMode) -> StatsUseCase: ...


class InsightUseCase(StatsUseCase, Protocol):
    """Shared, already constructed insight use case. ``kind`` tells them apart."""

    kind: InsightKind


# ---- Presentation collaborators ----
class StatsSiteProvider(Protocol):
    """Exposes the site whose stats are shown."""

    site_id: int


class StatsDateSelector(Protocol):
    """Date-range selector bound to one stats section."""

    section: StatsSection


class StatsDateSelectorFactory(Protocol):
    def build(self, section: StatsSection) -> StatsDateSelector: ...


__all__ = [
    "Dispatcher",
    "GranularUseCaseFactory",
    "InsightUseCase",
    "StatsDateSelector",
    "StatsDateSelectorFactory",
    "StatsSiteProvider",
    "StatsUseCase",
]
