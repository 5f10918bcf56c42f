"""Nested annotation bracket positioning to the right of the sequences.

Each annotation chain is an ordered list of classifications with a
nesting depth. Brackets are placed in one pass over the chain:

1. Classifications with no members are skipped entirely.
2. Before placing an entry at depth d, every stacked offset recorded at
   depth >= d is discarded, so siblings reuse their parent's column while
   deeper entries sit right of everything shallower.
3. startX = max(rightmost member polygon edge + gap, enclosing bracket's
   base column) + sum of stacked offsets.
4. The label is measured on the rendering surface and
   ``label_width + bracket_width + label_gap + label_padding`` is pushed.
5. The running maximum of ``endX + offset`` is the plot's right extent.

The stack lives only for the duration of one chain.

Steps 2 and 3 go beyond popping a single offset on equal depth: keeping
brackets from overlapping takes precedence over that simpler rule.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from ..config import PlotConfig, DEFAULT_CONFIG
from ..core.dataset import AnnotationChain, Dataset
from .geometry import Rect, bracket_points
from .scales import Scales


TextMeasure = Callable[[str, float], float]


@dataclass(frozen=True)
class BracketSpec:
    """Pixel geometry of one annotation bracket and its label."""

    classification: str
    depth: int
    chain: int          # index of the owning chain in Dataset.groups
    start_x: float
    end_x: float
    top_y: float
    bot_y: float
    label_x: float
    label_width: float
    offset: float       # horizontal space claimed by bracket + label
    font_size: float

    @property
    def mid_y(self) -> float:
        return self.bot_y + (self.top_y - self.bot_y) / 2

    @property
    def label_y(self) -> float:
        return self.mid_y

    @property
    def right_extent(self) -> float:
        return self.end_x + self.offset

    @property
    def rect(self) -> Rect:
        return Rect(
            x=self.start_x,
            y=self.top_y,
            width=self.end_x - self.start_x,
            height=self.bot_y - self.top_y,
        )

    @property
    def points(self) -> str:
        return bracket_points(self.start_x, self.end_x, self.top_y, self.bot_y)

    def to_dict(self) -> dict:
        return {
            "classification": self.classification,
            "depth": self.depth,
            "chain": self.chain,
            "points": self.points,
            "rect": self.rect.to_dict(),
            "labelX": self.label_x,
            "labelY": self.label_y,
            "labelWidth": self.label_width,
            "fontSize": self.font_size,
        }


class OffsetStack:
    """Horizontal offsets claimed by enclosing brackets, keyed by depth.

    Each frame also remembers the base column its bracket was anchored
    to, so a nested bracket never starts left of its parent's column.
    """

    __slots__ = ("_frames",)

    def __init__(self) -> None:
        self._frames: list[tuple[int, float, float]] = []  # (depth, offset, base)

    def unwind(self, depth: int) -> None:
        """Drop every frame at ``depth`` or deeper."""
        while self._frames and self._frames[-1][0] >= depth:
            self._frames.pop()

    def push(self, depth: int, offset: float, base: float) -> None:
        self._frames.append((depth, offset, base))

    @property
    def total(self) -> float:
        return math.fsum(offset for _, offset, _ in self._frames)

    @property
    def base(self) -> float:
        return self._frames[-1][2] if self._frames else -math.inf

    @property
    def offsets(self) -> list[float]:
        return [offset for _, offset, _ in self._frames]

    def __len__(self) -> int:
        return len(self._frames)


@dataclass(frozen=True)
class AnnotationLayout:
    """All brackets of one pass plus the figure's right-most extent."""

    brackets: tuple[BracketSpec, ...]
    plot_end: float

    def to_dict(self) -> dict:
        return {
            "brackets": [b.to_dict() for b in self.brackets],
            "plotEnd": self.plot_end,
        }


class AnnotationLayoutEngine:
    """Computes bracket positions for every annotation chain of a Dataset."""

    @staticmethod
    def layout_chain(
        chain: AnnotationChain,
        chain_index: int,
        dataset: Dataset,
        scales: Scales,
        measure: TextMeasure,
        config: PlotConfig = DEFAULT_CONFIG,
        plot_end: float = 0.0,
    ) -> tuple[list[BracketSpec], float]:
        """Place the brackets of one chain.

        Returns the bracket specs and the updated right-most extent.
        """
        stack = OffsetStack()
        bandwidth = scales.y.bandwidth()
        specs = []

        for entry in chain:
            members = [
                s for s in dataset.members(entry.classification)
                if scales.y(s) is not None
            ]
            if not members:
                continue

            stack.unwind(entry.depth)

            edge = max(scales.x(dataset.synthases[s].length) for s in members)
            base = max(edge + config.bracket_gap, stack.base)
            start_x = base + stack.total
            end_x = start_x + config.bracket_width

            y_pos = [scales.y(s) for s in members]
            top_y = min(y_pos)
            bot_y = max(y_pos) + bandwidth

            label_width = float(measure(entry.classification, config.annotation_font_size))
            offset = label_width + config.bracket_width + config.label_gap + config.label_padding

            spec = BracketSpec(
                classification=entry.classification,
                depth=entry.depth,
                chain=chain_index,
                start_x=start_x,
                end_x=end_x,
                top_y=top_y,
                bot_y=bot_y,
                label_x=end_x + config.label_gap,
                label_width=label_width,
                offset=offset,
                font_size=config.annotation_font_size,
            )
            specs.append(spec)
            stack.push(entry.depth, offset, base)
            plot_end = max(plot_end, spec.right_extent)

        return specs, plot_end

    @staticmethod
    def compute(
        dataset: Dataset,
        scales: Scales,
        measure: TextMeasure,
        config: PlotConfig = DEFAULT_CONFIG,
        plot_end: float = 0.0,
    ) -> AnnotationLayout:
        """Lay out every chain; plot_end seeds the right-extent maximum."""
        brackets: list[BracketSpec] = []
        for i, chain in enumerate(dataset.groups):
            specs, plot_end = AnnotationLayoutEngine.layout_chain(
                chain, i, dataset, scales, measure, config, plot_end,
            )
            brackets.extend(specs)
        return AnnotationLayout(brackets=tuple(brackets), plot_end=plot_end)
