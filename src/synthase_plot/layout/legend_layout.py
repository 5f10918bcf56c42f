"""Domain-type colour legend placed right of the widest annotation chain."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import PlotConfig, DEFAULT_CONFIG
from ..core.dataset import Dataset
from .scales import BandScale, Scales


@dataclass(frozen=True)
class LegendEntry:
    """One swatch + label in the legend (coordinates relative to the legend)."""

    type: str
    colour: str
    y: float
    width: float
    height: float
    font_size: float

    @property
    def text_x(self) -> float:
        return self.width

    @property
    def text_y(self) -> float:
        return self.height / 2

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "colour": self.colour,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "textX": self.text_x,
            "textY": self.text_y,
            "fontSize": self.font_size,
        }


@dataclass(frozen=True)
class LegendSpec:
    """Legend anchor point and its entries."""

    x: float
    y: float
    height: float
    entries: tuple[LegendEntry, ...]

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "height": self.height,
            "entries": [e.to_dict() for e in self.entries],
        }


class LegendLayoutEngine:
    """Orders legend entries by the order scale and centres the legend on the rows."""

    @staticmethod
    def compute(
        dataset: Dataset,
        scales: Scales,
        plot_end: float,
        config: PlotConfig = DEFAULT_CONFIG,
        colour_overrides: dict[str, str] | None = None,
    ) -> LegendSpec:
        overrides = colour_overrides or {}
        ordered = sorted(scales.types, key=scales.order)
        height = config.cell_height * len(ordered)
        band = BandScale(
            ordered,
            range=(0, height),
            padding_inner=config.cell_padding,
        )
        entries = tuple(
            LegendEntry(
                type=t,
                colour=overrides.get(t, scales.colour(t)),
                y=band(t),
                width=config.cell_width,
                height=band.bandwidth(),
                font_size=config.legend_font_size,
            )
            for t in ordered
        )

        last_y = scales.y(dataset.order[-1]) if dataset.order else 0.0
        return LegendSpec(
            x=plot_end,
            y=last_y / 2 - height / 2,
            height=height,
            entries=entries,
        )
