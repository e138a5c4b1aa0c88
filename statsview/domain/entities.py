from __future__ import annotations

"""Value objects passed between the resolver, the factory, and the view model."""

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class TitleRes:
    """Handle of a localizable string resource used as a screen title."""

    name: str
    """Resource name, resolved to text by the UI layer (for example ``stats_view_clicks``)."""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("TitleRes must be a non-empty string.")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ResolvedSelection:
    """Use case chosen for a view type, paired with the screen title."""

    use_case: Any
    title: TitleRes

    def __iter__(self) -> Iterator[Any]:
        # Allows ``use_case, title = resolve(...)``.
        yield self.use_case
        yield self.title


__all__ = ["ResolvedSelection", "TitleRes"]
