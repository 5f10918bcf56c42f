"""SynthaseWidget: anywidget bridge for Jupyter rendering.

Requires the [jupyter] optional extra: pip install synthase-plot[jupyter]
"""

from __future__ import annotations

import json
import logging
import pathlib

import anywidget
import traitlets

from ..config import PlotConfig
from ..state import PlotState
from .serializers import parse_event, serialize_config, serialize_details

logger = logging.getLogger(__name__)

_JS_DIR = pathlib.Path(__file__).parent.parent / "js"


class SynthaseWidget(anywidget.AnyWidget):
    """Jupyter widget showing the plot and relaying clicks back to Python.

    Communicates with JS via traitlets:
    - svg: current plot markup
    - details_json: hover panel data keyed by ``parent:index``
    - config_json: browser-relevant config (tooltip delay, sizes)
    - event_json: JS→Python remove / recolor requests
    """

    _esm = traitlets.Unicode("").tag(sync=True)
    _css = traitlets.Unicode("").tag(sync=True)

    svg = traitlets.Unicode("").tag(sync=True)
    details_json = traitlets.Unicode("{}").tag(sync=True)
    config_json = traitlets.Unicode("{}").tag(sync=True)
    event_json = traitlets.Unicode("{}").tag(sync=True)

    def __init__(
        self,
        state: PlotState,
        svg: str,
        details: dict[str, dict],
        config: PlotConfig,
        **kwargs,
    ) -> None:
        super().__init__(
            _esm=self._build_esm(),
            _css=self._build_css(),
            svg=svg,
            details_json=serialize_details(details),
            config_json=serialize_config(config),
            **kwargs,
        )
        self._state = state
        self.observe(self._on_event, names=["event_json"])

    @staticmethod
    def _build_esm() -> str:
        """Bundle the interaction code and the widget entry point into one ESM string."""
        parts = []
        for f in (_JS_DIR / "interaction.js", _JS_DIR / "index.js"):
            parts.append(f"// === {f.name} ===\n{f.read_text(encoding='utf-8')}")
        return "\n\n".join(parts)

    @staticmethod
    def _build_css() -> str:
        return (_JS_DIR / "synthase_plot.css").read_text(encoding="utf-8")

    def _on_event(self, change: dict) -> None:
        """Apply a remove or recolor request coming from JS."""
        event = parse_event(change["new"])
        if event is None:
            return
        if event["type"] == "remove":
            self._state.remove_sequence(event["row"])
        elif event["type"] == "recolor":
            self._state.recolor(event["domainType"], event["colour"])
        else:
            logger.warning("Ignoring unknown widget event: %s", json.dumps(event))

    def update_plot(self, svg: str, details: dict[str, dict]) -> None:
        """Push a re-rendered plot to JS in a single comm message."""
        with self.hold_sync():
            self.details_json = serialize_details(details)
            self.svg = svg
