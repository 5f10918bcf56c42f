"""Tests for the SynthasePlot builder."""

import pytest

import synthase_plot as sp
from synthase_plot.core.dataset import Dataset


class TestSynthasePlot:
    def test_from_mapping(self, nested_data):
        plot = sp.SynthasePlot(nested_data)
        assert isinstance(plot.dataset, Dataset)
        assert len(plot.layout.rows) == 4

    def test_from_dataset(self, nested):
        assert sp.SynthasePlot(nested).dataset is nested

    def test_config_overrides(self, nested):
        plot = sp.SynthasePlot(nested, plot_width=800)
        assert plot.config.plot_width == 800
        assert plot.layout.row("s1").width == pytest.approx(800)

    def test_unknown_config(self, nested):
        with pytest.raises(TypeError, match="Unknown config option"):
            sp.SynthasePlot(nested, width=800)

    def test_invalid_data(self):
        with pytest.raises(ValueError):
            sp.SynthasePlot({"order": ["a"], "synthases": {}})

    def test_builder_chaining(self, nested):
        plot = sp.SynthasePlot(nested)
        assert plot.remove_sequence("s3").recolor("KS", "#112233") is plot
        assert len(plot.dataset) == 3
        assert plot.state.colour_overrides == {"KS": "#112233"}

    def test_on_render(self, nested):
        seen = []
        plot = sp.SynthasePlot(nested).on_render(lambda p: seen.append(p))
        plot.remove_sequence("s1")
        assert seen[0] is plot.last_pass

    def test_to_svg(self, nested):
        plot = sp.SynthasePlot(nested)
        svg = plot.to_svg()
        assert svg.lstrip().startswith("<svg")
        assert f'viewBox="{plot.layout.to_dict()["viewBox"]}"' in svg
        plot.remove_sequence("s2")
        assert 'data-row="s2"' not in plot.to_svg()

    def test_domain_detail(self, nested):
        assert sp.SynthasePlot(nested).domain_detail("s1", 1).type == "AT"

    def test_domains_frame(self, nested):
        df = sp.SynthasePlot(nested).remove_sequence("s1").domains_frame()
        assert len(df) == 4
        assert "s1" not in set(df["parent"])

    def test_repr(self, nested):
        assert repr(sp.SynthasePlot(nested)) == (
            "SynthasePlot(sequences=4, classifications=6, groups=3)"
        )


class TestLoad:
    def test_load_json(self, nested, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(nested.to_json(), encoding="utf-8")
        plot = sp.load(path, bar_height=30)
        assert plot.dataset == nested
        assert plot.config.bar_height == 30
