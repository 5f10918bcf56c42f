"""HTMLExporter: generate standalone HTML files with hover and recolouring."""

from __future__ import annotations

import json
import logging
import pathlib

import jinja2

from ..config import PlotConfig

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"
_JS_DIR = pathlib.Path(__file__).parent.parent / "js"


def _script_json(obj) -> str:
    """JSON safe to inline inside a <script> element."""
    return json.dumps(obj).replace("</", "<\\/")


class HTMLExporter:
    """Export a plot as a standalone HTML file.

    The output is self-contained: the SVG, detail data, CSS and JS are
    all embedded inline. Row removal needs a live Python session and is
    not available in the exported file.
    """

    @staticmethod
    def export(
        path: str | pathlib.Path,
        svg: str,
        details: dict[str, dict],
        config: PlotConfig,
        title: str = "synthase-plot",
    ) -> None:
        """Write a standalone HTML file.

        Parameters
        ----------
        path : str or Path
            Output file path.
        svg : str
            Rendered plot markup.
        details : dict
            {``parent:index``: detail dict} for every drawn domain.
        config : PlotConfig
        title : str
            HTML page title.
        """
        path = pathlib.Path(path)

        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
            autoescape=False,  # SVG and JS are inlined verbatim
        )
        template = env.get_template("standalone.html.j2")
        html = template.render(
            title=title,
            svg=svg,
            details_json=_script_json(details),
            config_json=_script_json(config.to_dict()),
            js_source=HTMLExporter._build_js(),
            css_source=HTMLExporter._build_css(),
        )
        path.write_text(html, encoding="utf-8")
        logger.info("Wrote %s (%d domains)", path, len(details))

    @staticmethod
    def _build_js() -> str:
        return (_JS_DIR / "interaction.js").read_text(encoding="utf-8")

    @staticmethod
    def _build_css() -> str:
        return (_JS_DIR / "synthase_plot.css").read_text(encoding="utf-8")
