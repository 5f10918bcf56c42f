"""DomainDetail: everything the hover panel shows for one domain."""

from __future__ import annotations

import pathlib
from dataclasses import dataclass

import jinja2

from ..core.dataset import Dataset
from ..layout.tagging import TaggedDomain, tag_domains

CDD_URL = "https://www.ncbi.nlm.nih.gov/Structure/cdd/cddsrv.cgi?uid="

_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class DomainDetail:
    """Detail-panel content for a hovered domain, including copyable sequences."""

    parent: str
    index: int
    type: str
    name: str
    accession: str
    superfamily: str
    start: int
    end: int
    evalue: float | None
    bitscore: float | None
    domain_sequence: str
    parent_sequence: str

    @classmethod
    def from_tagged(cls, tagged: TaggedDomain, dataset: Dataset) -> DomainDetail:
        sequence = dataset.row(tagged.parent).sequence
        d = tagged.domain
        return cls(
            parent=tagged.parent,
            index=tagged.index,
            type=d.type,
            name=d.name,
            accession=d.accession,
            superfamily=d.superfamily,
            start=d.start,
            end=d.end,
            evalue=d.evalue,
            bitscore=d.bitscore,
            domain_sequence=sequence[d.start:d.end],
            parent_sequence=sequence,
        )

    @property
    def key(self) -> str:
        return f"{self.parent}:{self.index}"

    @property
    def domain_button(self) -> str:
        return f"Domain ({len(self.domain_sequence)}aa)"

    @property
    def parent_button(self) -> str:
        return f"Protein ({len(self.parent_sequence)}aa)"

    def to_dict(self) -> dict:
        return {
            "parent": self.parent,
            "index": self.index,
            "type": self.type,
            "domain": self.name,
            "accession": self.accession,
            "superfamily": self.superfamily,
            "start": self.start,
            "end": self.end,
            "evalue": self.evalue,
            "bitscore": self.bitscore,
            "domainSequence": self.domain_sequence,
            "parentSequence": self.parent_sequence,
            "html": self.to_html(),
        }

    def to_html(self) -> str:
        """Tooltip body: summary line, hit table and two copy buttons."""
        return _ENV.get_template("detail.html.j2").render(d=self, cdd_url=CDD_URL)


def domain_detail(dataset: Dataset, parent: str, index: int) -> DomainDetail:
    """Detail of the ``index``-th domain of sequence ``parent``."""
    row = dataset.row(parent)
    if not 0 <= index < len(row.domains):
        raise IndexError(
            f"Sequence '{parent}' has {len(row.domains)} domains; "
            f"index {index} is out of range."
        )
    tagged = TaggedDomain(domain=row.domains[index], parent=parent, p_length=row.length, index=index)
    return DomainDetail.from_tagged(tagged, dataset)


def all_details(dataset: Dataset) -> dict[str, dict]:
    """{``parent:index``: detail dict} for every domain in draw order."""
    return {
        t.key: DomainDetail.from_tagged(t, dataset).to_dict()
        for domains in tag_domains(dataset).values()
        for t in domains
    }
