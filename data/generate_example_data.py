"""Generate a reproducible random synthase dataset for synthase-plot.

Produces ``example_synthases.json`` with the shape the plot consumes:
- order:     sequence identifiers, top to bottom
- synthases: {id: {sequence, domains, classification}}
- types:     {classification: [ids]}
- groups:    nested annotation chains [{classification, depth}, ...]

Domain architectures are assembled from a few PKS / NRPS module templates
with random linkers, so rows of the same family look alike.

No synthase-plot dependency, only numpy.
"""

import json
from pathlib import Path

import numpy as np

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

SEED = 42
N_SEQUENCES = 24
RESIDUES = list("ACDEFGHIKLMNPQRSTVWY")

# (domain type, mean length, superfamily accession)
DOMAINS = {
    "KS": (420, "cl09938"),
    "AT": (300, "cl08282"),
    "DH": (170, "cl12031"),
    "ER": (310, "cl16912"),
    "KR": (180, "cl21454"),
    "ACP": (70, "cl09936"),
    "TE": (230, "cl21494"),
    "C": (300, "cl12052"),
    "A": (400, "cl17068"),
    "PCP": (70, "cl09936"),
}

# family -> (module template, modules range, classification path)
FAMILIES = {
    "modular_pks": (["KS", "AT", "DH", "KR", "ACP"], (1, 3), ["PKS", "Type I", "Modular"]),
    "iterative_pks": (["KS", "AT", "DH", "ER", "KR", "ACP"], (1, 1), ["PKS", "Type I", "Iterative"]),
    "nrps": (["C", "A", "PCP"], (1, 4), ["NRPS"]),
    "hybrid": (["C", "A", "PCP", "KS", "AT", "ACP"], (1, 1), ["PKS", "NRPS", "Hybrid"]),
}

FAMILY_WEIGHTS = [0.35, 0.25, 0.25, 0.15]

GROUPS = [
    [
        {"classification": "PKS", "depth": 0},
        {"classification": "Type I", "depth": 1},
        {"classification": "Modular", "depth": 2},
        {"classification": "Iterative", "depth": 2},
    ],
    [
        {"classification": "NRPS", "depth": 0},
        {"classification": "Hybrid", "depth": 1},
    ],
]


def build_domains(rng, template, n_modules, with_te):
    """Lay domains end to end with random linkers; returns (domains, length)."""
    domains = []
    pos = int(rng.integers(20, 80))
    types = template * n_modules + (["TE"] if with_te else [])
    for t in types:
        mean, superfamily = DOMAINS[t]
        length = max(40, int(rng.normal(mean, mean * 0.08)))
        domains.append({
            "type": t,
            "start": pos,
            "end": pos + length,
            "domain": f"{t}_domain",
            "accession": str(int(rng.integers(200000, 400000))),
            "superfamily": superfamily,
            "evalue": float(10.0 ** -rng.uniform(10, 120)),
            "bitscore": round(float(rng.uniform(80, 600)), 1),
        })
        pos += length + int(rng.integers(10, 60))
    return domains, pos + int(rng.integers(20, 80))


def generate(out_dir=None):
    rng = np.random.default_rng(SEED)
    out_dir = Path(out_dir) if out_dir else Path(__file__).parent

    names = list(FAMILIES)
    families = rng.choice(names, size=N_SEQUENCES, p=FAMILY_WEIGHTS)

    order, synthases = [], {}
    types = {}
    for i, family in enumerate(families):
        template, (lo, hi), classification = FAMILIES[family]
        header = f"SYN_{i + 1:03d}"
        n_modules = int(rng.integers(lo, hi + 1))
        domains, length = build_domains(rng, template, n_modules, with_te=rng.random() < 0.5)
        synthases[header] = {
            "sequence": "".join(rng.choice(RESIDUES, size=length)),
            "domains": domains,
            "classification": classification,
        }
        order.append(header)
        for c in classification:
            types.setdefault(c, []).append(header)

    # families that were never drawn leave classifications undeclared
    groups = [[g for g in chain if g["classification"] in types] for chain in GROUPS]
    groups = [chain for chain in groups if chain]

    data = {"order": order, "synthases": synthases, "types": types, "groups": groups}
    path = out_dir / "example_synthases.json"
    path.write_text(json.dumps(data, indent=1), encoding="utf-8")

    counts = {f: int((families == f).sum()) for f in names}
    print(f"Sequences:        {len(order)}")
    print(f"  Families:       {counts}")
    print(f"Classifications:  {sorted(types)}")
    print(f"File written to:  {path}")


if __name__ == "__main__":
    generate()
