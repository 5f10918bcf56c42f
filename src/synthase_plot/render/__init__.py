"""Reconciliation against a rendering surface."""

from .reconcile import KeyedDiff, Reconciler, RenderPass
from .surface import CHROME_KEYS, KINDS, RenderSurface
from .svg_surface import SVGSurface

__all__ = [
    "KeyedDiff",
    "Reconciler",
    "RenderPass",
    "CHROME_KEYS",
    "KINDS",
    "RenderSurface",
    "SVGSurface",
]
