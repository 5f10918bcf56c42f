"""Tests for the Jupyter widget bridge and its serializers."""

import json

import pytest

import synthase_plot as sp
from synthase_plot.config import DEFAULT_CONFIG
from synthase_plot.widget.serializers import parse_event, serialize_config, serialize_details


class TestSerializers:
    def test_config(self):
        assert json.loads(serialize_config(DEFAULT_CONFIG))["tooltipDelay"] == 400

    def test_details(self):
        assert json.loads(serialize_details({"a:0": {"type": "KS"}})) == {"a:0": {"type": "KS"}}

    def test_parse_event(self):
        assert parse_event("{}") is None
        assert parse_event("") is None
        assert parse_event('{"type": "remove", "row": "s1"}')["row"] == "s1"

    def test_parse_event_malformed(self):
        with pytest.raises(ValueError, match="row"):
            parse_event('{"type": "remove"}')
        with pytest.raises(ValueError, match="domainType"):
            parse_event('{"type": "recolor", "colour": "#000000"}')


class TestSynthaseWidget:
    @pytest.fixture
    def plot(self, nested):
        pytest.importorskip("anywidget")
        return sp.SynthasePlot(nested)

    def test_show_syncs_state(self, plot):
        widget = plot.show()
        assert widget.svg == plot.to_svg()
        assert "s1:0" in json.loads(widget.details_json)
        assert json.loads(widget.config_json)["barHeight"] == 20
        assert "attachInteractions" in widget._esm
        assert plot.show() is widget

    def test_remove_event(self, plot):
        widget = plot.show()
        widget.event_json = json.dumps({"type": "remove", "row": "s3", "nonce": 1})
        assert "s3" not in plot.dataset
        assert 'data-row="s3"' not in widget.svg
        assert "s3:0" not in json.loads(widget.details_json)

    def test_recolor_event(self, plot):
        widget = plot.show()
        widget.event_json = json.dumps(
            {"type": "recolor", "domainType": "KS", "colour": "#abcdef", "nonce": 2}
        )
        assert plot.state.colour_overrides == {"KS": "#abcdef"}
        assert 'fill="#abcdef"' in widget.svg

    def test_python_side_changes_pushed(self, plot):
        widget = plot.show()
        plot.remove_sequence("s1")
        assert widget.svg == plot.to_svg()
