"""Factory and builder that turn a view-type request into a ready view model.

The builder is created once per app from :class:`ViewAllDependencies`. For each
screen request it resolves the use case and title, then hands a
:class:`StatsViewAllVMFactory` to the UI framework, which calls ``create`` with
the view-model class it wants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Type

from ..domain.entities import TitleRes
from ..domain.errors import UnsupportedViewModelError
from ..domain.ports import (
    Dispatcher,
    GranularUseCaseFactory,
    InsightUseCase,
    StatsDateSelectorFactory,
    StatsSiteProvider,
    StatsUseCase,
)
from ..domain.stats_types import StatsGranularity, StatsSection, StatsViewType
from ..domain.view_all_routes import ViewAllRegistry
from ..usecases.resolve_view_all_use_case import ResolveViewAllUseCase
from ..viewmodels.view_all_vm import StatsViewAllVM


@dataclass(frozen=True)
class ViewAllDependencies:
    """Every collaborator the view-all builder needs, by name.

    Attributes:
        main_dispatcher: UI-thread scheduling handle.
        bg_dispatcher: Background scheduling handle.
        granular_factories: One factory per granular family.
        insight_use_cases: Pre-built insight use cases, one per kind.
        site_provider: Current-site context.
        date_selector_factory: Builds one date selector per view model.
    """

    main_dispatcher: Dispatcher
    bg_dispatcher: Dispatcher
    granular_factories: Sequence[GranularUseCaseFactory]
    insight_use_cases: Sequence[InsightUseCase]
    site_provider: StatsSiteProvider
    date_selector_factory: StatsDateSelectorFactory

    def __post_init__(self) -> None:
        # Frozen dataclass: store the sequences as tuples.
        object.__setattr__(self, "granular_factories", tuple(self.granular_factories))
        object.__setattr__(self, "insight_use_cases", tuple(self.insight_use_cases))


def section_for(granularity: Optional[StatsGranularity]) -> StatsSection:
    """Return the date-selector section for a request's granularity."""
    if granularity is None:
        return StatsSection.INSIGHTS
    return StatsSection.from_granularity(granularity)


def assemble_view_all_vm(
    *,
    use_case: StatsUseCase,
    title: TitleRes,
    main_dispatcher: Dispatcher,
    bg_dispatcher: Dispatcher,
    site_provider: StatsSiteProvider,
    date_selector_factory: StatsDateSelectorFactory,
    section: StatsSection,
) -> StatsViewAllVM:
    """Build a date selector for ``section`` and bundle it into a new VM."""
    date_selector = date_selector_factory.build(section)
    return StatsViewAllVM(
        main_dispatcher=main_dispatcher,
        bg_dispatcher=bg_dispatcher,
        use_case=use_case,
        site_provider=site_provider,
        date_selector=date_selector,
        title=title,
    )


class StatsViewAllVMFactory:
    """View-model factory with all assembly parameters bound up front."""

    def __init__(
        self,
        *,
        main_dispatcher: Dispatcher,
        bg_dispatcher: Dispatcher,
        use_case: StatsUseCase,
        site_provider: StatsSiteProvider,
        date_selector_factory: StatsDateSelectorFactory,
        section: StatsSection,
        title: TitleRes,
    ) -> None:
        self.main_dispatcher = main_dispatcher
        self.bg_dispatcher = bg_dispatcher
        self.use_case = use_case
        self.site_provider = site_provider
        self.date_selector_factory = date_selector_factory
        self.section = section
        self.title = title

    def create(self, model_cls: Type[StatsViewAllVM]) -> StatsViewAllVM:
        """Return a new VM if ``model_cls`` is :class:`StatsViewAllVM`.

        Raises:
            UnsupportedViewModelError: for any other requested class.
        """
        if model_cls is not StatsViewAllVM:
            raise UnsupportedViewModelError(model_cls)
        return assemble_view_all_vm(
            use_case=self.use_case,
            title=self.title,
            main_dispatcher=self.main_dispatcher,
            bg_dispatcher=self.bg_dispatcher,
            site_provider=self.site_provider,
            date_selector_factory=self.date_selector_factory,
            section=self.section,
        )


class StatsViewAllFactoryBuilder:
    """Resolve view-type requests into bound :class:`StatsViewAllVMFactory` objects.

    Call chain:
        The app creates one builder from :class:`ViewAllDependencies`. Each
        "view all" navigation calls ``build`` (or ``build_view_model``) with
        the requested view type and, for granular tabs, the tab granularity.
    """

    def __init__(
        self,
        dependencies: ViewAllDependencies,
        registry: Optional[ViewAllRegistry] = None,
    ) -> None:
        self.dependencies = dependencies
        self._resolve = ResolveViewAllUseCase(
            granular_factories=dependencies.granular_factories,
            insight_use_cases=dependencies.insight_use_cases,
            registry=registry or ViewAllRegistry.default(),
        )

    def build(
        self,
        view_type: StatsViewType,
        granularity: Optional[StatsGranularity] = None,
    ) -> StatsViewAllVMFactory:
        """Resolve ``view_type`` and bind the result into a VM factory.

        Raises:
            InvalidStatsTypeError: view type not routed on the requested path.
            UseCaseNotFoundError: route exists but its provider is not wired.
        """
        use_case, title = self._resolve(view_type, granularity)
        section = section_for(granularity)
        deps = self.dependencies
        return StatsViewAllVMFactory(
            main_dispatcher=deps.main_dispatcher,
            bg_dispatcher=deps.bg_dispatcher,
            use_case=use_case,
            site_provider=deps.site_provider,
            date_selector_factory=deps.date_selector_factory,
            section=section,
            title=title,
        )

    def build_view_model(
        self,
        view_type: StatsViewType,
        granularity: Optional[StatsGranularity] = None,
    ) -> StatsViewAllVM:
        """Shortcut for ``build(view_type, granularity).create(StatsViewAllVM)``."""
        return self.build(view_type, granularity).create(StatsViewAllVM)


__all__ = [
    "StatsViewAllFactoryBuilder",
    "StatsViewAllVMFactory",
    "ViewAllDependencies",
    "assemble_view_all_vm",
    "section_for",
]
