"""Fixed-shape geometry values and the bounding-box intersection predicate."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np
from pydantic import BaseModel, ConfigDict

Coord = float


class XB(BaseModel):
    """Axis-aligned box given as (x1, x2, y1, y2, z1, z2).

    The bounds are expected, but not required, to satisfy x1 <= x2 etc.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x1: Coord
    x2: Coord
    y1: Coord
    y2: Coord
    z1: Coord
    z2: Coord

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> XB:
        x1, x2, y1, y2, z1, z2 = values
        return cls(x1=x1, x2=x2, y1=y1, y2=y2, z1=z1, z2=z2)

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.x1, self.x2, self.y1, self.y2, self.z1, self.z2)

    def intersect(self, other: XB) -> bool:
        """Two boxes intersect if they overlap on all three axes.

        Touching faces do not count as overlap. The result is only meaningful
        when both boxes have ordered bounds.
        """
        intersect_x = self.x2 > other.x1 and other.x2 > self.x1
        intersect_y = self.y2 > other.y1 and other.y2 > self.y1
        intersect_z = self.z2 > other.z1 and other.z2 > self.z1
        return intersect_x and intersect_y and intersect_z

    def is_ordered(self) -> bool:
        return self.x1 <= self.x2 and self.y1 <= self.y2 and self.z1 <= self.z2

    def sorted(self) -> XB:
        """Return a copy with the bounds of each axis in ascending order."""
        return XB(
            x1=min(self.x1, self.x2),
            x2=max(self.x1, self.x2),
            y1=min(self.y1, self.y2),
            y2=max(self.y1, self.y2),
            z1=min(self.z1, self.z2),
            z2=max(self.z1, self.z2),
        )

    def try_xb(self) -> XB:
        return self


class XYZ(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    x: Coord
    y: Coord
    z: Coord

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class IJK(BaseModel):
    """Grid cell counts along each axis."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    i: int
    j: int
    k: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.i, self.j, self.k)


class RGB(BaseModel):
    """Colour triple, conventionally 0-255 (unchecked)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@runtime_checkable
class HasXB(Protocol):
    """Anything that can report a bounding box, or None if it has none."""

    def try_xb(self) -> XB | None: ...


def intersect(a: HasXB, b: HasXB) -> bool:
    """Test two objects for 3D overlap. An absent box never intersects."""
    a_xb = a.try_xb()
    if a_xb is None:
        return False
    b_xb = b.try_xb()
    if b_xb is None:
        return False
    return a_xb.intersect(b_xb)


def match_xbs(a: HasXB, b: HasXB) -> bool:
    """True if both objects have a bounding box and the boxes are identical."""
    a_xb = a.try_xb()
    b_xb = b.try_xb()
    if a_xb is None or b_xb is None:
        return False
    return a_xb == b_xb


def xb_array(items: Sequence[HasXB]) -> np.ndarray:
    """Stack bounding boxes into an (n, 6) float array; boxless rows are NaN."""
    out = np.full((len(items), 6), np.nan, dtype=np.float64)
    for row, item in enumerate(items):
        xb = item.try_xb()
        if xb is not None:
            out[row] = xb.as_tuple()
    return out


def intersection_matrix(a_items: Sequence[HasXB], b_items: Sequence[HasXB]) -> np.ndarray:
    """Pairwise ``intersect`` over two collections as an (n, m) bool array.

    Comparisons against NaN are False, so boxless items never intersect.
    """
    a = xb_array(a_items)[:, np.newaxis, :]
    b = xb_array(b_items)[np.newaxis, :, :]
    result = np.ones((len(a_items), len(b_items)), dtype=bool)
    for lo, hi in ((0, 1), (2, 3), (4, 5)):
        result &= (a[..., hi] > b[..., lo]) & (b[..., hi] > a[..., lo])
    return result
