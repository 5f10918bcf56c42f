"""Scale derivation: length → pixels, rows → bands, domain types → colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Hashable, Sequence

import numpy as np

from ..config import PlotConfig, DEFAULT_CONFIG
from ..core.color_scale import ColorScale
from ..core.dataset import Dataset

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


class LinearScale:
    """Continuous linear mapping from a numeric domain to a pixel range."""

    __slots__ = ("_d0", "_d1", "_r0", "_r1")

    def __init__(
        self,
        domain: tuple[float, float] = (0.0, 1.0),
        range: tuple[float, float] = (0.0, 1.0),
    ) -> None:
        self._d0, self._d1 = float(domain[0]), float(domain[1])
        self._r0, self._r1 = float(range[0]), float(range[1])

    @property
    def domain(self) -> tuple[float, float]:
        return (self._d0, self._d1)

    @property
    def range(self) -> tuple[float, float]:
        return (self._r0, self._r1)

    def __call__(self, value: float) -> float:
        span = self._d1 - self._d0
        if span == 0:
            # Degenerate domain: everything lands mid-range
            return (self._r0 + self._r1) / 2
        t = (float(value) - self._d0) / span
        return self._r0 + t * (self._r1 - self._r0)

    def ticks(self, count: int = 10) -> list[float]:
        """Human-friendly tick values (1, 2 or 5 × 10^k steps) within the domain."""
        start, stop = sorted((self._d0, self._d1))
        if count <= 0:
            return []
        if start == stop:
            return [start]
        step = (stop - start) / count
        power = math.floor(math.log10(step))
        error = step / 10 ** power
        factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
        if power < 0:
            inc = 10 ** -power / factor
            i1, i2 = round(start * inc), round(stop * inc)
            if i1 / inc < start:
                i1 += 1
            if i2 / inc > stop:
                i2 -= 1
            return [(i1 + i) / inc for i in range(i2 - i1 + 1)]
        inc = 10 ** power * factor
        i1, i2 = round(start / inc), round(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
        return [float((i1 + i) * inc) for i in range(i2 - i1 + 1)]


class BandScale:
    """Discrete keys → evenly spaced bands with inner/outer padding.

    Follows the standard padded band formula::

        step      = (r1 - r0) / max(1, n - inner + 2 * outer)
        start     = r0 + (r1 - r0 - step * (n - inner)) * align
        bandwidth = step * (1 - inner)
    """

    def __init__(
        self,
        keys: Sequence[Hashable] = (),
        range: tuple[float, float] = (0.0, 1.0),
        padding_inner: float = 0.0,
        padding_outer: float = 0.0,
        align: float = 0.5,
    ) -> None:
        self._keys = tuple(dict.fromkeys(keys))
        self._index = {k: i for i, k in enumerate(self._keys)}
        self._range = (float(range[0]), float(range[1]))
        self._padding_inner = min(1.0, float(padding_inner))
        self._padding_outer = float(padding_outer)
        self._align = float(align)
        self._positions, self._step, self._bandwidth = self._compute()

    @classmethod
    def padded(
        cls,
        keys: Sequence[Hashable],
        range: tuple[float, float],
        padding: float,
    ) -> BandScale:
        """Band scale with equal inner and outer padding."""
        return cls(keys, range, padding_inner=padding, padding_outer=padding)

    def _compute(self) -> tuple[np.ndarray, float, float]:
        n = len(self._keys)
        r0, r1 = self._range
        inner, outer = self._padding_inner, self._padding_outer
        step = (r1 - r0) / max(1.0, n - inner + outer * 2)
        start = r0 + (r1 - r0 - step * (n - inner)) * self._align
        positions = start + step * np.arange(n, dtype=np.float64)
        return positions, step, step * (1 - inner)

    @property
    def keys(self) -> tuple:
        return self._keys

    @property
    def range(self) -> tuple[float, float]:
        return self._range

    @property
    def step(self) -> float:
        return self._step

    def bandwidth(self) -> float:
        return self._bandwidth

    def __call__(self, key: Hashable) -> float | None:
        i = self._index.get(key)
        if i is None:
            return None
        return float(self._positions[i])


class OrdinalScale:
    """Discrete one-to-one mapping; unknown keys map to None."""

    def __init__(self, domain: Sequence[Hashable] = (), range: Sequence = ()) -> None:
        if len(domain) != len(range):
            raise ValueError(
                f"Ordinal domain ({len(domain)}) and range ({len(range)}) "
                f"must have the same length."
            )
        self._mapping = dict(zip(domain, range))

    @property
    def domain(self) -> list:
        return list(self._mapping)

    def __call__(self, key: Hashable):
        return self._mapping.get(key)

    def to_dict(self) -> dict:
        return dict(self._mapping)


@dataclass(frozen=True)
class Scales:
    """The five scales derived from one Dataset."""

    x: LinearScale
    y: BandScale
    scheme: ColorScale
    colour: OrdinalScale
    order: OrdinalScale
    types: tuple[str, ...]


def unique_domain_types(dataset: Dataset) -> tuple[str, ...]:
    """All distinct domain types over rows in draw order, sorted.

    Sorting makes the set independent of row order so the same types
    always receive the same colours.
    """
    found: set[str] = set()
    for header in dataset.order:
        found |= dataset.synthases[header].domain_types
    return tuple(sorted(found))


def derive_scales(dataset: Dataset, config: PlotConfig = DEFAULT_CONFIG) -> Scales:
    """Build all scales from scratch; nothing is carried over between calls."""
    types = unique_domain_types(dataset)
    n = len(types)
    scheme = ColorScale(config.colormap)

    x = LinearScale(domain=(0, dataset.max_length), range=(0, config.plot_width))
    y = BandScale.padded(
        dataset.order,
        range=(0, len(dataset.order) * config.bar_height),
        padding=config.y_axis_padding,
    )
    colour = OrdinalScale(types, scheme.sample(n))
    order = OrdinalScale(types, [i / n for i in range(n)])
    return Scales(x=x, y=y, scheme=scheme, colour=colour, order=order, types=types)
