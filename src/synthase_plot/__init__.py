"""synthase-plot: interactive domain architecture plots for protein sequences."""

from ._version import __version__
from .api import SynthasePlot
from .config import DEFAULT_CONFIG, PlotConfig
from .core.dataset import AnnotationEntry, Dataset, Domain, Row
from .state import PlotState
from .transform.removal import remove_sequence


def load(path, **config):
    """Read a dataset JSON file and build a plot from it.

    Parameters
    ----------
    path : str or Path
        JSON file with ``order``, ``synthases`` and optional ``types`` / ``groups``.
    **config
        PlotConfig overrides, e.g. ``plot_width=800``.
    """
    import pathlib

    dataset = Dataset.from_json(pathlib.Path(path).read_text(encoding="utf-8"))
    return SynthasePlot(dataset, **config)


__all__ = [
    "__version__",
    "SynthasePlot",
    "load",
    "DEFAULT_CONFIG",
    "PlotConfig",
    "AnnotationEntry",
    "Dataset",
    "Domain",
    "Row",
    "PlotState",
    "remove_sequence",
]
