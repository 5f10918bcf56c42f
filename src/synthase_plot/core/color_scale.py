"""ColorScale: matplotlib colormap → 256-entry sequential hue lookup table."""

from __future__ import annotations

import numpy as np

from .validation import validate_colormap_name


class ColorScale:
    """Maps t in [0, 1] to a hex colour via a 256-entry RGBA lookup table.

    Only used to seed the discrete domain-type colours: each of n types
    takes the sample at i / n.
    """

    __slots__ = ("_lut", "_cmap_name")

    LUT_SIZE = 256

    def __init__(self, cmap_name: str = "rainbow") -> None:
        validate_colormap_name(cmap_name)
        self._cmap_name = cmap_name
        self._lut = self._build_lut()

    def _build_lut(self) -> np.ndarray:
        """Build a (256, 4) uint8 RGBA lookup table from the matplotlib cmap."""
        import matplotlib

        cmap = matplotlib.colormaps[self._cmap_name]
        positions = np.linspace(0.0, 1.0, self.LUT_SIZE)
        rgba_float = cmap(positions)  # (256, 4) float in [0, 1]
        return np.round(rgba_float * 255).astype(np.uint8)

    @property
    def lut(self) -> np.ndarray:
        """(256, 4) uint8 RGBA lookup table."""
        return self._lut

    @property
    def cmap_name(self) -> str:
        return self._cmap_name

    def value_to_index(self, t: float) -> int:
        """Map t to a LUT index [0, 255], clamping out-of-range values."""
        clamped = max(0.0, min(1.0, float(t)))
        return int(round(clamped * (self.LUT_SIZE - 1)))

    def __call__(self, t: float) -> str:
        r, g, b, _ = self._lut[self.value_to_index(t)].tolist()
        return f"#{r:02x}{g:02x}{b:02x}"

    def sample(self, n: int) -> list[str]:
        """n evenly spaced colours at i / n for i in range(n)."""
        return [self(i / n) for i in range(n)]
