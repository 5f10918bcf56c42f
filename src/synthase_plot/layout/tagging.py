"""Domain tagging: per-pass projection linking each domain to its parent row."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from ..core.dataset import Dataset, Domain


@dataclass(frozen=True)
class TaggedDomain:
    """A Domain plus the back-references needed by detail views.

    Derived fresh on every layout pass; never stored on the Dataset.
    """

    domain: Domain
    parent: str
    p_length: int
    index: int

    @property
    def type(self) -> str:
        return self.domain.type

    @property
    def start(self) -> int:
        return self.domain.start

    @property
    def end(self) -> int:
        return self.domain.end

    @property
    def key(self) -> str:
        return f"{self.parent}:{self.index}"

    def to_dict(self) -> dict:
        return {**self.domain.to_dict(), "parent": self.parent, "pLength": self.p_length}


def tag_domains(dataset: Dataset) -> dict[str, tuple[TaggedDomain, ...]]:
    """Tag every domain of every row in draw order with its parent."""
    tagged = {}
    for header in dataset.order:
        row = dataset.synthases[header]
        tagged[header] = tuple(
            TaggedDomain(domain=d, parent=header, p_length=row.length, index=i)
            for i, d in enumerate(row.domains)
        )
    return tagged


def domains_frame(tagged: dict[str, tuple[TaggedDomain, ...]]) -> pd.DataFrame:
    """Flatten tagged domains into one table (one row per domain)."""
    columns = [
        "parent", "index", "type", "domain", "accession", "superfamily",
        "start", "end", "evalue", "bitscore", "pLength",
    ]
    records = [
        {**t.to_dict(), "index": t.index}
        for domains in tagged.values()
        for t in domains
    ]
    return pd.DataFrame.from_records(records, columns=columns)
