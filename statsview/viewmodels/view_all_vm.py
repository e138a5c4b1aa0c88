from __future__ import annotations

from dataclasses import dataclass

from ..domain.entities import TitleRes
from ..domain.ports import (
    Dispatcher,
    StatsDateSelector,
    StatsSiteProvider,
    StatsUseCase,
)
from ..domain.stats_types import StatsSection

_REQUIRED = (
    "main_dispatcher",
    "bg_dispatcher",
    "use_case",
    "site_provider",
    "date_selector",
)


@dataclass
class StatsViewAllVM:
    """State holder for a full-list statistics screen.

    The VM owns ``date_selector`` (built for it during assembly). Dispatchers,
    use case, and site provider are shared with the rest of the app and only
    referenced here.
    """

    main_dispatcher: Dispatcher
    bg_dispatcher: Dispatcher
    use_case: StatsUseCase
    site_provider: StatsSiteProvider
    date_selector: StatsDateSelector
    title: TitleRes

    def __post_init__(self) -> None:
        missing = [name for name in _REQUIRED if getattr(self, name) is None]
        if missing:
            raise TypeError(
                f"StatsViewAllVM requires {', '.join(missing)}."
            )
        if not isinstance(self.title, TitleRes):
            raise TypeError("StatsViewAllVM.title must be a TitleRes.")

    @property
    def section(self) -> StatsSection:
        """Section the date selector was built for."""
        return self.date_selector.section


__all__ = ["StatsViewAllVM"]
