"""Row removal: strike a sequence and prune the classifications it leaves empty."""

from __future__ import annotations

import logging
from dataclasses import replace

from ..core.dataset import AnnotationChain, Dataset

logger = logging.getLogger(__name__)


def remove_sequence(query: str, dataset: Dataset) -> Dataset:
    """Return a copy of ``dataset`` without the sequence ``query``.

    1. ``query`` is dropped from ``order`` and ``synthases``.
    2. For each classification the sequence carried, ``query`` is dropped
       from its member list; classifications left empty are deleted.
    3. Annotation entries for deleted classifications are dropped from
       their chains, and chains left empty are dropped.

    The input dataset is never modified.
    """
    if query not in dataset.synthases:
        raise KeyError(
            f"Cannot remove '{query}': no such sequence. "
            f"Available: {list(dataset.order)[:5]}"
        )
    classes = set(dataset.synthases[query].classification)

    types = {}
    for name, members in dataset.types.items():
        if name in classes:
            members = tuple(s for s in members if s != query)
            if not members:
                continue
        types[name] = members

    deleted = classes - types.keys()
    groups = prune_groups(dataset.groups, deleted)

    logger.debug(
        "Removed '%s'; deleted classifications %s; %d -> %d annotation chains",
        query, sorted(deleted), len(dataset.groups), len(groups),
    )
    return replace(
        dataset,
        order=tuple(s for s in dataset.order if s != query),
        synthases={k: v for k, v in dataset.synthases.items() if k != query},
        types=types,
        groups=groups,
    )


def prune_groups(
    groups: tuple[AnnotationChain, ...],
    deleted: set[str],
) -> tuple[AnnotationChain, ...]:
    """Drop entries naming a deleted classification, then empty chains.

    Nested entries whose parent was deleted are kept as long as their own
    classification survives.
    """
    pruned = []
    for chain in groups:
        kept = tuple(g for g in chain if g.classification not in deleted)
        if kept:
            pruned.append(kept)
    return tuple(pruned)
