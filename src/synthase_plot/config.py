"""PlotConfig: independent numeric overrides for plot geometry and styling."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from numbers import Real
from typing import Any


@dataclass(frozen=True)
class PlotConfig:
    """All tunable sizes of a synthase plot.

    Every field is an independent override; no field constrains another.
    """

    # Sequence rows
    bar_height: float = 20.0
    head_width: float = 10.0
    plot_width: float = 600.0
    y_axis_gap: float = 10.0
    y_axis_padding: float = 0.4

    # Legend cells
    cell_height: float = 20.0
    cell_width: float = 30.0
    cell_padding: float = 0.3
    legend_gap: float = 10.0

    # Annotation brackets
    bracket_gap: float = 10.0
    bracket_width: float = 10.0
    label_gap: float = 10.0
    label_padding: float = 6.0

    # Fonts (px)
    legend_font_size: float = 12.0
    title_font_size: float = 16.0
    x_label_font_size: float = 14.0
    y_label_font_size: float = 12.0
    annotation_font_size: float = 12.0

    # Timing (ms)
    transition_duration: float = 250.0
    tooltip_delay: float = 400.0

    x_ticks: int = 6
    colormap: str = "rainbow"

    def with_overrides(self, **overrides: Any) -> PlotConfig:
        """Return a copy with the given fields replaced.

        Raises TypeError for unknown field names or non-numeric values
        given to numeric fields.
        """
        valid = {f.name: f for f in fields(self)}
        unknown = sorted(set(overrides) - set(valid))
        if unknown:
            raise TypeError(
                f"Unknown config option(s): {unknown}. "
                f"Valid options: {sorted(valid)}"
            )
        for name, value in overrides.items():
            if name == "colormap":
                if not isinstance(value, str):
                    raise TypeError(
                        f"colormap must be a string, got {type(value).__name__}."
                    )
            elif isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(
                    f"{name} must be a number, got {type(value).__name__}."
                )
        return replace(self, **overrides)

    def to_dict(self) -> dict:
        """Serialize as camelCase keys for JS consumption."""
        def camel(name: str) -> str:
            head, *rest = name.split("_")
            return head + "".join(w.capitalize() for w in rest)

        return {camel(f.name): getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = PlotConfig()
