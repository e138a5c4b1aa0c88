from __future__ import annotations

import logging

import pytest

from statsview.adapters.stats_mock import (
    StubDateSelectorFactory,
    StubInsightUseCase,
    StubSiteProvider,
)
from statsview.app.main import stub_dependencies
from statsview.app.view_all_factory import (
    StatsViewAllFactoryBuilder,
    StatsViewAllVMFactory,
    ViewAllDependencies,
    assemble_view_all_vm,
    section_for,
)
from statsview.domain.entities import TitleRes
from statsview.domain.errors import (
    InvalidStatsTypeError,
    UnsupportedViewModelError,
    UseCaseNotFoundError,
)
from statsview.domain.stats_types import (
    GranularFamily,
    InsightKind,
    StatsGranularity,
    StatsSection,
    StatsViewType,
)
from statsview.tests.unit.helpers import make_builder
from statsview.viewmodels.view_all_vm import StatsViewAllVM


def test_assemble_builds_date_selector_once() -> None:
    selectors = StubDateSelectorFactory()
    site = StubSiteProvider()
    use_case = object()

    vm = assemble_view_all_vm(
        use_case=use_case,
        title=TitleRes("stats_view_followers"),
        main_dispatcher="main",
        bg_dispatcher="bg",
        site_provider=site,
        date_selector_factory=selectors,
        section=StatsSection.INSIGHTS,
    )

    assert selectors.sections == [StatsSection.INSIGHTS]
    assert vm.date_selector.section is StatsSection.INSIGHTS
    assert vm.use_case is use_case
    assert vm.site_provider is site
    assert vm.main_dispatcher == "main"
    assert vm.bg_dispatcher == "bg"


def test_section_for_granularity_presence() -> None:
    assert section_for(None) is StatsSection.INSIGHTS
    assert section_for(StatsGranularity.MONTHS) is StatsSection.MONTHS


def test_builder_insight_request_uses_insights_section() -> None:
    selectors = StubDateSelectorFactory()
    builder = make_builder(selectors)

    vm = builder.build_view_model(StatsViewType.COMMENTS)

    assert selectors.sections == [StatsSection.INSIGHTS]
    assert vm.title == TitleRes("stats_view_comments")
    assert vm.use_case.kind is InsightKind.COMMENTS


def test_builder_granular_request_uses_granularity_section() -> None:
    selectors = StubDateSelectorFactory()
    builder = make_builder(selectors)

    vm = builder.build_view_model(StatsViewType.CLICKS, StatsGranularity.WEEKS)

    assert selectors.sections == [StatsSection.WEEKS]
    assert vm.section is StatsSection.WEEKS
    assert vm.title == TitleRes("stats_view_clicks")
    assert vm.use_case.family is GranularFamily.CLICKS


def test_factory_create_returns_new_vm_per_call() -> None:
    selectors = StubDateSelectorFactory()
    factory = make_builder(selectors).build(StatsViewType.FOLLOWERS)

    first = factory.create(StatsViewAllVM)
    second = factory.create(StatsViewAllVM)

    assert isinstance(first, StatsViewAllVM)
    assert first is not second
    assert first.date_selector is not second.date_selector
    assert first.use_case is second.use_case
    assert selectors.sections == [StatsSection.INSIGHTS, StatsSection.INSIGHTS]


class _OtherVM:
    pass


class _DerivedVM(StatsViewAllVM):
    pass


@pytest.mark.parametrize("model_cls", [_OtherVM, _DerivedVM, object, None])
def test_factory_create_rejects_other_classes(model_cls) -> None:
    selectors = StubDateSelectorFactory()
    factory = make_builder(selectors).build(StatsViewType.FOLLOWERS)

    with pytest.raises(UnsupportedViewModelError) as exc:
        factory.create(model_cls)

    assert exc.value.code == "VIEW_MODEL_NOT_FOUND"
    assert exc.value.model_cls is model_cls
    assert selectors.sections == []


def test_builder_build_binds_resolution_into_factory() -> None:
    factory = make_builder().build(StatsViewType.VIDEO_PLAYS, StatsGranularity.DAYS)

    assert isinstance(factory, StatsViewAllVMFactory)
    assert factory.section is StatsSection.DAYS
    assert factory.title == TitleRes("stats_view_videos")
    assert factory.use_case.family is GranularFamily.COUNTRY_VIEWS


def test_builder_propagates_invalid_stats_type() -> None:
    with pytest.raises(InvalidStatsTypeError):
        make_builder().build(StatsViewType.TOP_POSTS_AND_PAGES)
    with pytest.raises(InvalidStatsTypeError):
        make_builder().build(StatsViewType.INSIGHTS_TODAY, StatsGranularity.YEARS)


def test_builder_propagates_missing_provider() -> None:
    deps = ViewAllDependencies(
        main_dispatcher="main",
        bg_dispatcher="bg",
        granular_factories=[],
        insight_use_cases=[StubInsightUseCase(kind=InsightKind.TODAY)],
        site_provider=StubSiteProvider(),
        date_selector_factory=StubDateSelectorFactory(),
    )
    builder = StatsViewAllFactoryBuilder(deps)

    assert builder.build_view_model(StatsViewType.INSIGHTS_TODAY).use_case.kind is InsightKind.TODAY
    with pytest.raises(UseCaseNotFoundError):
        builder.build(StatsViewType.AUTHORS, StatsGranularity.DAYS)


def test_dependencies_store_tuples() -> None:
    deps = stub_dependencies()
    assert isinstance(deps.granular_factories, tuple)
    assert isinstance(deps.insight_use_cases, tuple)
    assert len(deps.granular_factories) == len(GranularFamily)
    assert len(deps.insight_use_cases) == len(InsightKind)


def test_builder_emits_no_log_records(caplog) -> None:
    with caplog.at_level(logging.DEBUG):
        make_builder().build(StatsViewType.SEARCH_TERMS, StatsGranularity.YEARS)
        with pytest.raises(InvalidStatsTypeError):
            make_builder().build(StatsViewType.SEARCH_TERMS)
    assert caplog.records == []
