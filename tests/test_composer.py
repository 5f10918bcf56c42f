"""Tests for the full layout recompute."""

import pytest

from synthase_plot.config import DEFAULT_CONFIG
from synthase_plot.core.dataset import Dataset
from synthase_plot.layout.composer import (
    AxisSpec,
    LayoutComposer,
    X_LABEL,
    chain_key,
    chain_keys,
)


@pytest.fixture
def composer():
    return LayoutComposer(DEFAULT_CONFIG)


class TestLayoutComposer:
    def test_idempotent(self, composer, nested, measure):
        a = composer.compute(nested, measure)
        b = composer.compute(nested, measure)
        assert a.to_dict() == b.to_dict()
        assert a == b

    def test_rows(self, composer, nested, measure):
        spec = composer.compute(nested, measure)
        assert [r.id for r in spec.rows] == ["s1", "s2", "s3", "s4"]
        s1 = spec.row("s1")
        assert s1.width == pytest.approx(600)
        assert s1.height == pytest.approx(spec.scales.y.bandwidth())
        assert s1.y == pytest.approx(spec.scales.y("s1"))
        assert s1.clip_id == "s1-clip"
        assert s1.clip_key == "s1-clip-group"

    def test_domain_rects(self, composer, nested, measure):
        ks = composer.compute(nested, measure).row("s1").domains[0]
        assert ks.x == pytest.approx(20)
        assert ks.width == pytest.approx(100)
        assert ks.tagged.key == "s1:0"

    def test_colour_overrides_apply_to_rects(self, composer, nested, measure):
        spec = composer.compute(nested, measure, colour_overrides={"KS": "#123456"})
        fills = {d.type: d.fill for r in spec.rows for d in r.domains}
        assert fills["KS"] == "#123456"
        assert fills["AT"] == spec.scales.colour("AT")

    def test_row_lookup_missing(self, composer, nested, measure):
        with pytest.raises(KeyError):
            composer.compute(nested, measure).row("nope")

    def test_labels_and_chrome(self, composer, nested, measure):
        spec = composer.compute(nested, measure)
        assert spec.title.text == "Domain architecture of 4 sequences"
        assert spec.x_label.text == X_LABEL
        assert spec.title.x == pytest.approx(300)
        label = spec.y_labels[0]
        assert (label.text, label.anchor) == ("s1", "end")
        assert label.x == -DEFAULT_CONFIG.y_axis_gap

    def test_axis(self, composer, nested, measure):
        axis = composer.compute(nested, measure).x_axis
        assert axis.y == DEFAULT_CONFIG.bar_height * 4
        assert axis.length == 600
        assert [v for v, _ in axis.ticks] == [0, 50, 100, 150, 200, 250, 300]
        assert axis.to_dict()["ticks"][-1] == {"value": 300, "x": 600, "label": "300"}

    def test_tick_label_thousands(self):
        assert AxisSpec.tick_label(1000.0) == "1,000"
        assert AxisSpec.tick_label(0.5) == "0.5"

    def test_legend_right_of_brackets(self, composer, nested, measure):
        spec = composer.compute(nested, measure)
        assert spec.legend.x == spec.plot_end
        assert all(b.right_extent <= spec.legend.x for b in spec.brackets)

    def test_legend_clear_of_plot_without_groups(self, composer, two_row_data, measure):
        two_row_data["groups"] = []
        spec = composer.compute(Dataset.from_dict(two_row_data), measure)
        assert spec.legend.x == pytest.approx(600 + DEFAULT_CONFIG.legend_gap)

    def test_chains(self, composer, nested, measure):
        spec = composer.compute(nested, measure)
        assert spec.chains == ("PKS,Type1,Modular", "PKS,Iterative,Type1", "NRPS,Empty")

    def test_view_box_contains_everything(self, composer, nested, measure):
        spec = composer.compute(nested, measure)
        min_x, min_y, width, height = spec.view_box
        assert min_x < -DEFAULT_CONFIG.y_axis_gap
        assert min_x + width > spec.legend.x + DEFAULT_CONFIG.cell_width
        assert min_y + height > spec.x_label.y

    def test_to_dict(self, composer, nested, measure):
        d = composer.compute(nested, measure).to_dict()
        assert set(d["colours"]) == {"AT", "DH", "KR", "KS"}
        assert len(d["viewBox"].split()) == 4
        assert d["rows"][0]["clipId"] == "s1-clip"

    def test_empty_dataset(self, composer, measure):
        spec = composer.compute(Dataset(), measure)
        assert spec.rows == ()
        assert spec.brackets == ()
        assert spec.legend.entries == ()
        assert spec.x_axis.ticks == ()
        assert spec.title.text == "Domain architecture of 0 sequences"


class TestChainKeys:
    def test_chain_key(self, nested):
        assert chain_key(nested.groups[2]) == "NRPS,Empty"

    def test_repeated_chains_disambiguated(self, nested):
        groups = (nested.groups[0], nested.groups[0], nested.groups[1])
        assert chain_keys(groups) == (
            "PKS,Type1,Modular", "PKS,Type1,Modular#1", "PKS,Iterative,Type1",
        )
