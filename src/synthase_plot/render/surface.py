"""RenderSurface: what the reconciliation driver needs from a renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod


# Entity kinds in drawing order (later kinds draw on top)
KINDS = ("chrome", "clip", "row", "chain", "bracket", "legend")

# Fixed singleton elements of every plot
CHROME_KEYS = ("title", "x_label", "x_axis", "y_axis", "legend_group")


class RenderSurface(ABC):
    """Base class for anything that can display a synthase plot.

    Visual nodes are addressed by ``(kind, key)`` where ``key`` is the
    entity's stable identity across updates.
    """

    @abstractmethod
    def create(self, kind: str, key: str, attrs: dict) -> None:
        """Create a node for an entering entity."""
        ...

    @abstractmethod
    def update(self, kind: str, key: str, attrs: dict, duration: float = 0.0) -> None:
        """Move an existing node to new attributes.

        ``duration`` (ms) is a hint for animated surfaces; callers never
        wait for a transition to finish.
        """
        ...

    @abstractmethod
    def remove(self, kind: str, key: str) -> None:
        """Remove the node of an exiting entity."""
        ...

    @abstractmethod
    def measure_text(self, text: str, font_size: float) -> float:
        """Rendered pixel width of ``text`` at ``font_size``."""
        ...
