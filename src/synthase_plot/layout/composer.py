"""LayoutComposer: assembles scales, rows, brackets and legend into one spec."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import PlotConfig, DEFAULT_CONFIG
from ..core.dataset import Dataset
from .annotation_layout import AnnotationLayoutEngine, BracketSpec, TextMeasure
from .geometry import fmt, sequence_polygon
from .legend_layout import LegendLayoutEngine, LegendSpec
from .scales import Scales, derive_scales
from .tagging import TaggedDomain, tag_domains


TITLE_TEMPLATE = "Domain architecture of {n} sequences"
X_LABEL = "Sequence length (amino acids)"
X_LABEL_OFFSET = 40.0   # below the x axis


@dataclass(frozen=True)
class DomainRect:
    """Pixel rectangle of one domain inside its row."""

    tagged: TaggedDomain
    x: float
    width: float
    height: float
    fill: str

    @property
    def type(self) -> str:
        return self.tagged.type

    def to_dict(self) -> dict:
        return {
            "key": self.tagged.key,
            "index": self.tagged.index,
            "type": self.type,
            "x": self.x,
            "width": self.width,
            "height": self.height,
            "fill": self.fill,
        }


@dataclass(frozen=True)
class RowSpec:
    """Geometry of one sequence row (coordinates relative to the row origin)."""

    id: str
    y: float
    width: float
    height: float
    points: str
    domains: tuple[DomainRect, ...]

    @property
    def clip_id(self) -> str:
        return f"{self.id}-clip"

    @property
    def clip_key(self) -> str:
        return f"{self.id}-clip-group"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "points": self.points,
            "clipId": self.clip_id,
            "domains": [d.to_dict() for d in self.domains],
        }


@dataclass(frozen=True)
class TextSpec:
    """A positioned text element (title, axis label, row label)."""

    text: str
    x: float
    y: float
    font_size: float
    anchor: str = "middle"

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "fontSize": self.font_size,
            "anchor": self.anchor,
        }


@dataclass(frozen=True)
class AxisSpec:
    """Bottom axis: vertical position, pixel length and (value, pixel) ticks."""

    y: float
    length: float
    ticks: tuple[tuple[float, float], ...]

    @staticmethod
    def tick_label(value: float) -> str:
        if float(value).is_integer():
            return f"{int(value):,}"
        return f"{value:g}"

    def to_dict(self) -> dict:
        return {
            "y": self.y,
            "length": self.length,
            "ticks": [
                {"value": v, "x": x, "label": self.tick_label(v)}
                for v, x in self.ticks
            ],
        }


@dataclass(frozen=True)
class LayoutSpec:
    """Complete geometry of one update pass."""

    scales: Scales = field(compare=False)
    rows: tuple[RowSpec, ...]
    y_labels: tuple[TextSpec, ...]
    brackets: tuple[BracketSpec, ...]
    chains: tuple[str, ...]
    legend: LegendSpec
    x_axis: AxisSpec
    title: TextSpec
    x_label: TextSpec
    plot_end: float
    view_box: tuple[float, float, float, float]

    def row(self, identifier: str) -> RowSpec:
        for r in self.rows:
            if r.id == identifier:
                return r
        raise KeyError(f"No row '{identifier}' in this layout.")

    def to_dict(self) -> dict:
        """Serialize to a dict for JSON transfer to JS."""
        return {
            "rows": [r.to_dict() for r in self.rows],
            "yLabels": [t.to_dict() for t in self.y_labels],
            "brackets": [b.to_dict() for b in self.brackets],
            "chains": list(self.chains),
            "legend": self.legend.to_dict(),
            "xAxis": self.x_axis.to_dict(),
            "title": self.title.to_dict(),
            "xLabel": self.x_label.to_dict(),
            "plotEnd": self.plot_end,
            "viewBox": " ".join(fmt(v) for v in self.view_box),
            "colours": self.scales.colour.to_dict(),
        }


def chain_key(chain) -> str:
    """Identity of an annotation chain: its classification names joined."""
    return ",".join(g.classification for g in chain)


def chain_keys(groups) -> tuple[str, ...]:
    """Chain identities for a whole Dataset; repeats get a ``#n`` suffix."""
    seen: dict[str, int] = {}
    keys = []
    for chain in groups:
        key = chain_key(chain)
        n = seen.get(key, 0)
        seen[key] = n + 1
        keys.append(key if n == 0 else f"{key}#{n}")
    return tuple(keys)


class LayoutComposer:
    """Runs the full recompute: scales → rows → brackets → legend.

    Pure with respect to its inputs; calling compute twice on the same
    Dataset yields identical geometry.
    """

    def __init__(self, config: PlotConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> PlotConfig:
        return self._config

    def compute(
        self,
        dataset: Dataset,
        measure: TextMeasure,
        colour_overrides: dict[str, str] | None = None,
    ) -> LayoutSpec:
        cfg = self._config
        overrides = colour_overrides or {}
        scales = derive_scales(dataset, cfg)
        bandwidth = scales.y.bandwidth()
        tagged = tag_domains(dataset)

        rows = []
        y_labels = []
        for header in dataset.order:
            row = dataset.synthases[header]
            y = scales.y(header)
            rects = tuple(
                DomainRect(
                    tagged=t,
                    x=scales.x(t.start),
                    width=scales.x(t.end - t.start),
                    height=bandwidth,
                    fill=overrides.get(t.type, scales.colour(t.type)),
                )
                for t in tagged[header]
            )
            rows.append(RowSpec(
                id=header,
                y=y,
                width=scales.x(row.length),
                height=bandwidth,
                points=sequence_polygon(row, scales.x, scales.y, cfg.head_width),
                domains=rects,
            ))
            y_labels.append(TextSpec(
                text=header,
                x=-cfg.y_axis_gap,
                y=y + bandwidth / 2,
                font_size=cfg.y_label_font_size,
                anchor="end",
            ))

        seed = scales.x(dataset.max_length) + cfg.legend_gap if dataset.order else 0.0
        annotations = AnnotationLayoutEngine.compute(
            dataset, scales, measure, cfg, plot_end=seed,
        )
        legend = LegendLayoutEngine.compute(
            dataset, scales, annotations.plot_end, cfg, overrides,
        )

        n = len(dataset.order)
        axis_y = cfg.bar_height * n
        ticks = scales.x.ticks(cfg.x_ticks) if n else []
        x_axis = AxisSpec(
            y=axis_y,
            length=scales.x.range[1],
            ticks=tuple((v, scales.x(v)) for v in ticks),
        )
        centre = scales.x(dataset.max_length) / 2 if n else 0.0
        title = TextSpec(
            text=TITLE_TEMPLATE.format(n=n),
            x=centre,
            y=0.0,
            font_size=cfg.title_font_size,
        )
        x_label = TextSpec(
            text=X_LABEL,
            x=centre,
            y=axis_y + X_LABEL_OFFSET,
            font_size=cfg.x_label_font_size,
        )

        view_box = self._view_box(dataset, legend, annotations.plot_end, x_label, measure)

        return LayoutSpec(
            scales=scales,
            rows=tuple(rows),
            y_labels=tuple(y_labels),
            brackets=annotations.brackets,
            chains=chain_keys(dataset.groups),
            legend=legend,
            x_axis=x_axis,
            title=title,
            x_label=x_label,
            plot_end=annotations.plot_end,
            view_box=view_box,
        )

    def _view_box(
        self,
        dataset: Dataset,
        legend: LegendSpec,
        plot_end: float,
        x_label: TextSpec,
        measure: TextMeasure,
    ) -> tuple[float, float, float, float]:
        """Bounding box (min_x, min_y, width, height) of everything drawn."""
        cfg = self._config
        label_w = max(
            (measure(h, cfg.y_label_font_size) for h in dataset.order), default=0.0,
        )
        legend_label_w = max(
            (measure(e.type, cfg.legend_font_size) for e in legend.entries), default=0.0,
        )
        min_x = -(cfg.y_axis_gap + label_w + cfg.legend_gap)
        min_y = -(cfg.title_font_size * 2)
        right = max(cfg.plot_width, plot_end)
        if legend.entries:
            # swatch, 0.4em text offset, label
            right = max(right, legend.x + cfg.cell_width + 0.4 * cfg.legend_font_size + legend_label_w)
        bottom = max(x_label.y + cfg.x_label_font_size, legend.y + legend.height)
        return (min_x, min_y, right + cfg.legend_gap - min_x, bottom - min_y)
