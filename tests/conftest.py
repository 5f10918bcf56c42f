"""Shared test fixtures for synthase-plot."""

import pytest

from synthase_plot.core.dataset import Dataset
from synthase_plot.render.surface import RenderSurface

_RESIDUES = "ACDEFGHIKLMNPQRSTVWY"


def make_sequence(length):
    return (_RESIDUES * (length // len(_RESIDUES) + 1))[:length]


def char_width_measure(text, font_size):
    """Deterministic stand-in for rendered text width."""
    return len(text) * font_size * 0.6


class RecordingSurface(RenderSurface):
    """Fake surface that records every call it receives."""

    def __init__(self):
        self.calls = []

    def create(self, kind, key, attrs):
        self.calls.append(("create", kind, key, attrs, None))

    def update(self, kind, key, attrs, duration=0.0):
        self.calls.append(("update", kind, key, attrs, duration))

    def remove(self, kind, key):
        self.calls.append(("remove", kind, key, None, None))

    def measure_text(self, text, font_size):
        return char_width_measure(text, font_size)

    def keys(self, op, kind):
        return [c[2] for c in self.calls if c[0] == op and c[1] == kind]

    def clear(self):
        self.calls = []


@pytest.fixture
def measure():
    return char_width_measure


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def two_row_data():
    """Rows A (length 100) and B (length 50), both classified X."""
    return {
        "order": ["A", "B"],
        "synthases": {
            "A": {
                "sequence": make_sequence(100),
                "domains": [{"type": "KS", "start": 0, "end": 40}],
                "classification": ["X"],
            },
            "B": {
                "sequence": make_sequence(50),
                "domains": [{"type": "AT", "start": 10, "end": 30}],
                "classification": ["X"],
            },
        },
        "types": {"X": ["A", "B"]},
        "groups": [[{"classification": "X", "depth": 0}]],
    }


@pytest.fixture
def sole_owner_data(two_row_data):
    """Same rows, but A alone carries X."""
    data = dict(two_row_data)
    data["synthases"] = dict(two_row_data["synthases"])
    data["synthases"]["B"] = {**two_row_data["synthases"]["B"], "classification": []}
    data["types"] = {"X": ["A"]}
    return data


@pytest.fixture
def nested_data():
    """Four rows with three annotation chains.

    Lengths 300/200/150/100, so with the default 600px plot width
    x(length) == 2 * length.
    """
    return {
        "order": ["s1", "s2", "s3", "s4"],
        "synthases": {
            "s1": {
                "sequence": make_sequence(300),
                "domains": [
                    {"type": "KS", "start": 10, "end": 60, "domain": "PKS_KS",
                     "accession": "238201", "superfamily": "cl09938",
                     "evalue": 1.2e-50, "bitscore": 180.5},
                    {"type": "AT", "start": 80, "end": 150},
                ],
                "classification": ["PKS", "Type1", "Modular"],
            },
            "s2": {
                "sequence": make_sequence(200),
                "domains": [
                    {"type": "KS", "start": 5, "end": 40},
                    {"type": "DH", "start": 50, "end": 90},
                ],
                "classification": ["PKS", "Type1"],
            },
            "s3": {
                "sequence": make_sequence(150),
                "domains": [{"type": "AT", "start": 0, "end": 30}],
                "classification": ["PKS", "Iterative"],
            },
            "s4": {
                "sequence": make_sequence(100),
                "domains": [{"type": "KR", "start": 20, "end": 70}],
                "classification": ["NRPS"],
            },
        },
        "types": {
            "PKS": ["s1", "s2", "s3"],
            "Type1": ["s1", "s2"],
            "Modular": ["s1"],
            "Iterative": ["s3"],
            "NRPS": ["s4"],
            "Empty": [],
        },
        "groups": [
            [
                {"classification": "PKS", "depth": 0},
                {"classification": "Type1", "depth": 1},
                {"classification": "Modular", "depth": 2},
            ],
            [
                {"classification": "PKS", "depth": 0},
                {"classification": "Iterative", "depth": 1},
                {"classification": "Type1", "depth": 1},
            ],
            [
                {"classification": "NRPS", "depth": 0},
                {"classification": "Empty", "depth": 1},
            ],
        ],
    }


@pytest.fixture
def two_row(two_row_data):
    return Dataset.from_dict(two_row_data)


@pytest.fixture
def nested(nested_data):
    return Dataset.from_dict(nested_data)
