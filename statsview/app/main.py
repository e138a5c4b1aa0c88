"""Command-line entry point for inspecting view-all routing.

Builds a view model against the in-memory stub collaborators and prints what
the UI would receive. ``--list`` prints the whole route table instead.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List, Optional, Sequence

from ..adapters.stats_mock import (
    StubDateSelectorFactory,
    StubSiteProvider,
    stub_granular_factories,
    stub_insight_use_cases,
)
from ..domain.errors import UseCaseError
from ..domain.stats_types import StatsGranularity, StatsViewType
from ..domain.view_all_routes import ViewAllRegistry
from ..utils import logging as logging_utils
from .view_all_factory import StatsViewAllFactoryBuilder, ViewAllDependencies

_log = logging.getLogger(__name__)


def stub_dependencies(
    *,
    main_dispatcher: Any = "main",
    bg_dispatcher: Any = "bg",
    site_provider: Optional[StubSiteProvider] = None,
    date_selector_factory: Optional[StubDateSelectorFactory] = None,
) -> ViewAllDependencies:
    """Return :class:`ViewAllDependencies` wired entirely with stubs."""
    return ViewAllDependencies(
        main_dispatcher=main_dispatcher,
        bg_dispatcher=bg_dispatcher,
        granular_factories=stub_granular_factories(),
        insight_use_cases=stub_insight_use_cases(),
        site_provider=site_provider or StubSiteProvider(),
        date_selector_factory=date_selector_factory or StubDateSelectorFactory(),
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statsview",
        description="Resolve a stats view type into its view-all view model.",
    )
    parser.add_argument("view_type", nargs="?", help="view type name, e.g. CLICKS")
    parser.add_argument(
        "-g",
        "--granularity",
        help="DAYS, WEEKS, MONTHS or YEARS; omit for insight view types",
    )
    parser.add_argument("--list", action="store_true", help="print the route table and exit")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def format_routes(registry: ViewAllRegistry) -> List[str]:
    """Return one ``VIEW_TYPE  path  title`` line per routed view type."""
    lines: List[str] = []
    for view_type, title in registry.titles().items():
        path = "granular" if registry.is_granular(view_type) else "insights"
        lines.append(f"{view_type.name:<30} {path:<9} {title}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    level = logging_utils.configure_root(debug=args.debug)
    _log.debug("Effective log level: %s", logging_utils.level_name(level))

    if args.list:
        for line in format_routes(ViewAllRegistry.default()):
            print(line)
        return 0
    if not args.view_type:
        parser.error("view_type is required unless --list is given")

    try:
        view_type = StatsViewType.parse(args.view_type)
        granularity = (
            StatsGranularity.parse(args.granularity) if args.granularity else None
        )
    except ValueError as exc:
        parser.error(str(exc))

    builder = StatsViewAllFactoryBuilder(stub_dependencies())
    try:
        vm = builder.build_view_model(view_type, granularity)
    except UseCaseError as err:
        print(f"{err.code}: {err.message}", file=sys.stderr)
        return 2
    _log.debug(
        "Built view model for %s (%s): title=%s section=%s",
        view_type.name,
        granularity.name if granularity else "insights",
        vm.title,
        vm.section.name,
    )

    print(f"title:    {vm.title}")
    print(f"use case: {vm.use_case}")
    print(f"section:  {vm.section.name}")
    return 0


__all__ = ["format_routes", "main", "stub_dependencies"]
