"""Geometric primitives: rectangles, point lists and sequence polygons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.dataset import Row
from .scales import BandScale, LinearScale


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: Rect) -> bool:
        """True if the interiors intersect (shared edges do not count)."""
        return (
            self.x < other.right and other.x < self.right
            and self.y < other.bottom and other.y < self.bottom
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def fmt(value: float) -> str:
    """Compact, deterministic number formatting for SVG attributes."""
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_points(points: Iterable[tuple[float, float]]) -> str:
    """Serialize (x, y) pairs as an SVG ``points`` attribute."""
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in points)


def polygon_vertices(
    width: float,
    height: float,
    head_width: float,
) -> list[tuple[float, float]]:
    """The five vertices of a sequence glyph: a body ending in an arrowhead.

    The arrowhead never extends left of the origin on very short rows.
    """
    head = max(0.0, width - head_width)
    return [
        (0.0, 0.0),
        (head, 0.0),
        (width, height / 2),
        (head, height),
        (0.0, height),
    ]


def sequence_polygon(
    row: Row,
    x: LinearScale,
    y: BandScale,
    head_width: float,
) -> str:
    """Point string of a row's polygon, relative to the row's own origin."""
    return format_points(polygon_vertices(x(row.length), y.bandwidth(), head_width))


def bracket_points(start_x: float, end_x: float, top_y: float, bot_y: float) -> str:
    """Point string of an open bracket ``]`` spanning top_y..bot_y."""
    return format_points([
        (start_x, top_y),
        (end_x, top_y),
        (end_x, bot_y),
        (start_x, bot_y),
    ])
