"""Dataset: rows, classifications and annotation chains of a synthase plot.

Immutable: row removal and every other edit returns a new Dataset.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Domain:
    """An annotated sub-region of a sequence."""

    type: str
    start: int
    end: int
    name: str = ""
    accession: str = ""
    superfamily: str = ""
    evalue: float | None = None
    bitscore: float | None = None

    @property
    def length(self) -> int:
        return self.end - self.start

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Domain:
        return cls(
            type=str(data["type"]),
            start=data["start"],
            end=data["end"],
            name=str(data.get("domain", data.get("name", "")) or ""),
            accession=str(data.get("accession", "") or ""),
            superfamily=str(data.get("superfamily", "") or ""),
            evalue=data.get("evalue"),
            bitscore=data.get("bitscore"),
        )

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "start": self.start,
            "end": self.end,
            "domain": self.name,
            "accession": self.accession,
            "superfamily": self.superfamily,
            "evalue": self.evalue,
            "bitscore": self.bitscore,
        }


@dataclass(frozen=True)
class Row:
    """One sequence (synthase) with its domains and classifications."""

    sequence: str
    domains: tuple[Domain, ...] = ()
    classification: tuple[str, ...] = ()

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def domain_types(self) -> set[str]:
        return {d.type for d in self.domains}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Row:
        return cls(
            sequence=str(data["sequence"]),
            domains=tuple(Domain.from_dict(d) for d in data.get("domains", ())),
            # dict.fromkeys keeps first-seen order while dropping repeats
            classification=tuple(dict.fromkeys(data.get("classification", ()))),
        )

    def to_dict(self) -> dict:
        return {
            "sequence": self.sequence,
            "domains": [d.to_dict() for d in self.domains],
            "classification": list(self.classification),
        }


@dataclass(frozen=True)
class AnnotationEntry:
    """One bracket in a nested annotation chain."""

    classification: str
    depth: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnnotationEntry:
        return cls(classification=str(data["classification"]), depth=data.get("depth", 0))

    def to_dict(self) -> dict:
        return {"classification": self.classification, "depth": self.depth}


AnnotationChain = tuple[AnnotationEntry, ...]


@dataclass(frozen=True)
class Dataset:
    """The root value of a synthase plot.

    Attributes
    ----------
    order : row identifiers, top to bottom
    synthases : {row identifier: Row}
    types : {classification: (row identifiers carrying it, ...)}
    groups : annotation chains, each an ordered tuple of AnnotationEntry
    """

    order: tuple[str, ...] = ()
    synthases: dict[str, Row] = field(default_factory=dict)
    types: dict[str, tuple[str, ...]] = field(default_factory=dict)
    groups: tuple[AnnotationChain, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], validate: bool = True) -> Dataset:
        """Build a Dataset from its JSON-like mapping form.

        Parameters
        ----------
        data : mapping with ``order``, ``synthases``, ``types`` and ``groups``
        validate : check structural invariants (raises ValueError/TypeError)
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Expected a mapping with 'order', 'synthases', 'types' and "
                f"'groups' keys, got {type(data).__name__}."
            )
        missing = [k for k in ("order", "synthases") if k not in data]
        if missing:
            raise ValueError(f"Dataset is missing required key(s): {missing}")

        dataset = cls(
            order=tuple(str(s) for s in data["order"]),
            synthases={
                str(k): Row.from_dict(v) for k, v in data["synthases"].items()
            },
            types={
                str(k): tuple(str(s) for s in v)
                for k, v in data.get("types", {}).items()
            },
            groups=tuple(
                tuple(AnnotationEntry.from_dict(g) for g in chain)
                for chain in data.get("groups", ())
            ),
        )
        if validate:
            from .validation import validate_dataset
            validate_dataset(dataset)
        return dataset

    @classmethod
    def from_json(cls, text: str, validate: bool = True) -> Dataset:
        return cls.from_dict(json.loads(text), validate=validate)

    def to_dict(self) -> dict:
        """Plain JSON-compatible form; round-trips through from_dict."""
        return {
            "order": list(self.order),
            "synthases": {k: v.to_dict() for k, v in self.synthases.items()},
            "types": {k: list(v) for k, v in self.types.items()},
            "groups": [[g.to_dict() for g in chain] for chain in self.groups],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def row(self, identifier: str) -> Row:
        if identifier not in self.synthases:
            raise KeyError(
                f"Sequence '{identifier}' not found. "
                f"Available: {list(self.order)[:5]}"
                + (f" (and {len(self.order) - 5} more)" if len(self.order) > 5 else "")
            )
        return self.synthases[identifier]

    def members(self, classification: str) -> tuple[str, ...]:
        if classification not in self.types:
            raise KeyError(
                f"Classification '{classification}' not found. "
                f"Available: {sorted(self.types)}"
            )
        return self.types[classification]

    @property
    def max_length(self) -> int:
        """Longest sequence among rows in draw order (0 when empty)."""
        return max((self.synthases[s].length for s in self.order), default=0)

    def __len__(self) -> int:
        return len(self.order)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.synthases
