"""
Module: bounds

Purpose:
    Rectangles produced by the layout for hit-testing, and the
    append-only BoundingsLookup that collects them.

Key Functions:
    - Bounds.contains(x, y): Point-in-rectangle test
    - BoundingsLookup.find_group(x, y): Stave group under a point
    - BoundingsLookup.find_bar(x, y): Bar under a point

Dependencies:
    - dataclasses (std)

Used By:
    - layout.stave_group: Contributes group and bar rectangles
    - layout.engine: build_boundings_lookup()
    - controller: Returns the lookup with the render result
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Bounds:
    """
    Axis-aligned rectangle in page units.

    The region is [x, x + w) x [y, y + h).

    Example:
        >>> b = Bounds(x=40, y=100, w=200, h=50)
        >>> b.contains(40, 100)
        True
        >>> b.contains(240, 100)  # right edge is exclusive
        False
    """

    x: float
    y: float
    w: float
    h: float

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.w < 0:
            raise ValueError(f"w must be >= 0: {self.w}")
        if self.h < 0:
            raise ValueError(f"h must be >= 0: {self.h}")

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, x: float, y: float) -> bool:
        """True if x in [x, right) and y in [y, bottom)."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def __repr__(self) -> str:
        return f"Bounds({self.x:g}, {self.y:g}, {self.w:g}, {self.h:g})"


@dataclass(frozen=True, slots=True)
class BarBounds:
    """Rectangle of one bar within a stave group."""

    bar_index: int
    bounds: Bounds


@dataclass(frozen=True)
class StaveGroupBounds:
    """
    Rectangles of one laid out line.

    Attributes:
        index: Stave group index (line number, 0-based)
        visual_bounds: Rectangle covering all tracks of the line
        bars: Bar rectangles, left to right
    """

    index: int
    visual_bounds: Bounds
    bars: Tuple[BarBounds, ...] = ()

    def find_bar(self, x: float, y: float) -> Optional[BarBounds]:
        """Bar containing the point, or None."""
        for bar in self.bars:
            if bar.bounds.contains(x, y):
                return bar
        return None


class BoundingsLookup:
    """
    Append-only spatial index of stave groups.

    Populated once after layout, in group order. The layout engine
    only writes to it.
    """

    def __init__(self) -> None:
        self._groups: List[StaveGroupBounds] = []

    def add_stave_group(self, bounds: StaveGroupBounds) -> None:
        """Append the rectangles of one stave group."""
        self._groups.append(bounds)

    @property
    def groups(self) -> Tuple[StaveGroupBounds, ...]:
        return tuple(self._groups)

    def find_group(self, x: float, y: float) -> Optional[StaveGroupBounds]:
        """Stave group whose visual bounds contain the point, or None."""
        for group in self._groups:
            if group.visual_bounds.contains(x, y):
                return group
        return None

    def find_bar(self, x: float, y: float) -> Optional[BarBounds]:
        """Bar under the point, or None."""
        group = self.find_group(x, y)
        if group is None:
            return None
        return group.find_bar(x, y)

    def __len__(self) -> int:
        return len(self._groups)
