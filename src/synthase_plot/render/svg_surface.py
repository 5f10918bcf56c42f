"""SVGSurface: in-memory node store that serializes to a static SVG document."""

from __future__ import annotations

import logging
import math
import pathlib

import jinja2

from .surface import KINDS, RenderSurface

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"


class SVGSurface(RenderSurface):
    """Keeps the latest attributes of every node and renders them as SVG.

    Transitions are applied instantly. Text is measured with matplotlib's
    font machinery so bracket offsets match a sans-serif rendering.
    """

    def __init__(self, font_family: str = "sans-serif") -> None:
        self._nodes: dict[str, dict[str, dict]] = {kind: {} for kind in KINDS}
        self._font_family = font_family
        self._font = None
        self._text_widths: dict[tuple[str, float], float] = {}
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # --- RenderSurface ---

    def create(self, kind: str, key: str, attrs: dict) -> None:
        if key in self._nodes[kind]:
            raise ValueError(f"A {kind} node keyed '{key}' already exists.")
        self._nodes[kind][key] = dict(attrs)

    def update(self, kind: str, key: str, attrs: dict, duration: float = 0.0) -> None:
        if key not in self._nodes[kind]:
            raise KeyError(f"No {kind} node keyed '{key}' to update.")
        self._nodes[kind][key] = dict(attrs)

    def remove(self, kind: str, key: str) -> None:
        if self._nodes[kind].pop(key, None) is None:
            logger.debug("Ignoring removal of missing %s node '%s'", kind, key)

    def measure_text(self, text: str, font_size: float) -> float:
        if not text.strip():
            return 0.0
        key = (text, float(font_size))
        if key not in self._text_widths:
            from matplotlib.textpath import TextPath

            path = TextPath((0, 0), text, size=font_size, prop=self._font_properties())
            width = path.get_extents().width
            self._text_widths[key] = float(width) if math.isfinite(width) else 0.0
        return self._text_widths[key]

    def _font_properties(self):
        if self._font is None:
            from matplotlib.font_manager import FontProperties

            # a bare string would be parsed as a fontconfig pattern
            self._font = FontProperties(family=[self._font_family])
        return self._font

    # --- Inspection ---

    def nodes(self, kind: str) -> dict[str, dict]:
        """Current nodes of one kind, in creation order."""
        return dict(self._nodes[kind])

    def node(self, kind: str, key: str) -> dict:
        return self._nodes[kind][key]

    def __len__(self) -> int:
        return sum(len(v) for v in self._nodes.values())

    # --- Serialization ---

    def to_svg(self, view_box: str = "0 0 800 400", font_family: str | None = None) -> str:
        """Render all current nodes as a standalone SVG string."""
        chrome = self._nodes["chrome"]
        brackets_by_chain: dict[str, list[dict]] = {key: [] for key in self._nodes["chain"]}
        for attrs in self._nodes["bracket"].values():
            brackets_by_chain.setdefault(attrs["chainKey"], []).append(attrs)

        template = self._env.get_template("plot.svg.j2")
        return template.render(
            view_box=view_box,
            font_family=font_family or self._font_family,
            title=chrome.get("title"),
            x_label=chrome.get("x_label"),
            x_axis=chrome.get("x_axis"),
            y_axis=chrome.get("y_axis"),
            legend_group=chrome.get("legend_group"),
            clips=list(self._nodes["clip"].values()),
            rows=list(self._nodes["row"].values()),
            chains=brackets_by_chain,
            legend=list(self._nodes["legend"].values()),
        )
