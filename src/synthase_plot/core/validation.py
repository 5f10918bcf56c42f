"""Input validation with clear error messages for bioinformaticians."""

from __future__ import annotations

from collections import Counter
from numbers import Integral
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dataset import Dataset


def _preview(items: list) -> str:
    return f"{items[:5]}" + (f" (and {len(items) - 5} more)" if len(items) > 5 else "")


def validate_dataset(dataset: Dataset) -> Dataset:
    """Check the structural invariants of a Dataset.

    Returns the dataset unchanged. Empty classification member lists are
    allowed; they are simply not drawn.
    """
    counts = Counter(dataset.order)
    dupes = [s for s, n in counts.items() if n > 1]
    if dupes:
        raise ValueError(f"Sequence IDs in 'order' must be unique. Found duplicates: {_preview(dupes)}")

    missing = [s for s in dataset.order if s not in dataset.synthases]
    if missing:
        raise ValueError(
            f"'order' references sequences missing from 'synthases': {_preview(missing)}"
        )

    for header, row in dataset.synthases.items():
        validate_row(header, row, dataset.types)

    for classification, members in dataset.types.items():
        dangling = [s for s in members if s not in dataset.synthases]
        if dangling:
            raise ValueError(
                f"Classification '{classification}' lists unknown sequences: {_preview(dangling)}"
            )
        if len(set(members)) != len(members):
            raise ValueError(f"Classification '{classification}' lists a sequence more than once.")
        unmarked = [s for s in members if classification not in dataset.synthases[s].classification]
        if unmarked:
            raise ValueError(
                f"Sequences {_preview(unmarked)} are listed under '{classification}' "
                f"but do not carry it in their 'classification'."
            )

    for i, chain in enumerate(dataset.groups):
        names = [g.classification for g in chain]
        if len(set(names)) != len(names):
            raise ValueError(f"Annotation group {i} repeats a classification: {names}")
        for entry in chain:
            if entry.classification not in dataset.types:
                raise ValueError(
                    f"Annotation group {i} references unknown classification "
                    f"'{entry.classification}'."
                )
            if isinstance(entry.depth, bool) or not isinstance(entry.depth, Integral) or entry.depth < 0:
                raise ValueError(
                    f"Annotation depth must be a non-negative integer, got "
                    f"{entry.depth!r} for '{entry.classification}'."
                )
    return dataset


def validate_row(header: str, row, types: dict) -> None:
    """Check domain bounds and classification references of one row."""
    length = row.length
    for d in row.domains:
        if not isinstance(d.start, Integral) or not isinstance(d.end, Integral):
            raise TypeError(
                f"Domain bounds must be integers in '{header}', got "
                f"start={d.start!r}, end={d.end!r}."
            )
        if not 0 <= d.start < d.end <= length:
            raise ValueError(
                f"Domain '{d.type}' in '{header}' has invalid bounds "
                f"{d.start}-{d.end} (sequence length {length}). "
                f"Expected 0 <= start < end <= length."
            )
        if not d.type:
            raise ValueError(f"Domain at {d.start}-{d.end} in '{header}' has no type.")
    unknown = [c for c in row.classification if c not in types]
    if unknown:
        raise ValueError(
            f"Sequence '{header}' carries classifications missing from 'types': {_preview(unknown)}"
        )


def validate_colour(colour: str) -> str:
    """Validate a colour string understood by matplotlib; returns hex."""
    from matplotlib.colors import to_hex

    try:
        return to_hex(colour)
    except ValueError:
        raise ValueError(
            f"Invalid colour {colour!r}. Use a hex string like '#1f77b4' "
            f"or a named colour like 'tab:blue'."
        ) from None


def validate_colormap_name(name: str) -> str:
    """Validate that a matplotlib colormap name exists."""
    import matplotlib

    try:
        matplotlib.colormaps[name]
    except KeyError:
        raise ValueError(
            f"Unknown colormap '{name}'. Use a matplotlib colormap name "
            f"like 'rainbow', 'turbo', 'hsv', etc."
        ) from None
    return name
