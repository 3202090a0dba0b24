"""Lift element-level functions into containers."""

from .pair import map_first, map_second
from .sequence import filter_lift, map_lift

__all__ = ["map_lift", "filter_lift", "map_first", "map_second"]
