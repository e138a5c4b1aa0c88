"""Domain-level error types raised while resolving and assembling view-all screens.

All errors carry a stable ``code`` so callers can branch on the failure kind
without matching message text. Bad caller input (:class:`InvalidStatsTypeError`)
is kept apart from wiring defects (:class:`UseCaseNotFoundError`,
:class:`UnsupportedViewModelError`).
"""

from __future__ import annotations

from typing import Any, Optional

from .stats_types import StatsViewType


class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class InvalidStatsTypeError(UseCaseError, ValueError):
    """Requested view type has no route on the chosen path."""

    def __init__(self, view_type: Any, path: str) -> None:
        name = getattr(view_type, "name", str(view_type))
        super().__init__("INVALID_STATS_TYPE", f"Invalid {path} stats type: {name}")
        self.view_type = view_type
        self.path = path


class UseCaseNotFoundError(UseCaseError, LookupError):
    """A route exists but none of the injected providers declares its discriminant."""

    def __init__(self, view_type: StatsViewType, discriminant: Any) -> None:
        super().__init__(
            "USE_CASE_NOT_FOUND",
            f"No use case provider for {view_type.name} ({discriminant.name})",
        )
        self.view_type = view_type
        self.discriminant = discriminant


class UnsupportedViewModelError(UseCaseError, TypeError):
    """The generic ``create`` protocol asked for a class this factory does not produce."""

    def __init__(self, model_cls: Optional[type]) -> None:
        name = getattr(model_cls, "__name__", repr(model_cls))
        super().__init__("VIEW_MODEL_NOT_FOUND", f"ViewModel Not Found: {name}")
        self.model_cls = model_cls


__all__ = [
    "InvalidStatsTypeError",
    "UnsupportedViewModelError",
    "UseCaseError",
    "UseCaseNotFoundError",
]
