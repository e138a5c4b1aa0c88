"""Domain package exports for view-all enums, value objects, and routes."""

from .entities import ResolvedSelection, TitleRes
from .errors import (
    InvalidStatsTypeError,
    UnsupportedViewModelError,
    UseCaseError,
    UseCaseNotFoundError,
)
from .stats_types import (
    GranularFamily,
    InsightKind,
    StatsGranularity,
    StatsSection,
    StatsViewType,
    UseCaseMode,
)
from .view_all_routes import GranularRoute, InsightRoute, ViewAllRegistry

__all__ = [
    "GranularFamily",
    "GranularRoute",
    "InsightKind",
    "InsightRoute",
    "InvalidStatsTypeError",
    "ResolvedSelection",
    "StatsGranularity",
    "StatsSection",
    "StatsViewType",
    "TitleRes",
    "UnsupportedViewModelError",
    "UseCaseError",
    "UseCaseNotFoundError",
    "UseCaseMode",
    "ViewAllRegistry",
]
