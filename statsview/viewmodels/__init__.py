"""ViewModel package for the view-all statistics screen.

Call context:
    ``statsview/app/view_all_factory.py`` assembles :class:`StatsViewAllVM`
    instances; the UI layer binds to them.

Dependencies:
    Domain types and ports only. Use-case resolution and collaborator wiring
    remain in the use-case and app layers.
"""

from .view_all_vm import StatsViewAllVM

__all__ = ["StatsViewAllVM"]
