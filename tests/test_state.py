"""Tests for the reactive PlotState."""

import logging

import pytest

from synthase_plot.render.reconcile import Reconciler
from synthase_plot.state import PlotState


@pytest.fixture
def state(nested, recording_surface):
    return PlotState(nested, Reconciler(recording_surface))


class TestPlotState:
    def test_initial_pass(self, state):
        assert state.last_pass.number == 1
        assert len(state.last_pass.layout.rows) == 4

    def test_remove_sequence_rerenders(self, state, nested):
        out = state.remove_sequence("s2")
        assert state.dataset is out
        assert "s2" not in state.dataset
        assert state.last_pass.number == 2
        assert state.last_pass.diffs["row"].exiting == ("s2",)
        assert "s2" in nested  # caller's value untouched

    def test_remove_unknown(self, state):
        with pytest.raises(KeyError):
            state.remove_sequence("nope")
        assert state.last_pass.number == 1

    def test_remove_logs(self, state, caplog):
        with caplog.at_level(logging.INFO, logger="synthase_plot.state"):
            state.remove_sequence("s1")
        assert "Removed sequence 's1'" in caplog.text

    def test_recolor(self, state):
        assert state.recolor("KS", "red") == "#ff0000"
        assert state.colour_overrides == {"KS": "#ff0000"}
        colours = {e.type: e.colour for e in state.last_pass.layout.legend.entries}
        assert colours["KS"] == "#ff0000"
        assert state.last_pass.number == 2

    def test_recolor_keeps_dataset(self, state):
        before = state.dataset
        state.recolor("AT", "#00ff00")
        assert state.dataset is before

    def test_recolor_unknown_type(self, state):
        with pytest.raises(ValueError, match="Unknown domain type"):
            state.recolor("XYZ", "red")

    def test_recolor_invalid_colour(self, state):
        with pytest.raises(ValueError, match="Invalid colour"):
            state.recolor("KS", "not-a-colour")

    def test_overrides_survive_removal(self, state):
        state.recolor("KS", "#000000")
        state.remove_sequence("s4")
        fills = {d.type: d.fill for r in state.last_pass.layout.rows for d in r.domains}
        assert fills["KS"] == "#000000"

    def test_reset_colours(self, state):
        state.recolor("KS", "#000000")
        state.reset_colours()
        colours = {e.type: e.colour for e in state.last_pass.layout.legend.entries}
        assert colours["KS"] == state.last_pass.layout.scales.colour("KS")

    def test_on_render_callbacks(self, state):
        seen = []
        state.on_render(lambda p: seen.append(p.number))
        state.remove_sequence("s4")
        state.recolor("KS", "blue")
        assert seen == [2, 3]

    def test_last_write_wins(self, state):
        state.remove_sequence("s1")
        state.remove_sequence("s2")
        assert [r.id for r in state.last_pass.layout.rows] == ["s3", "s4"]

    def test_domain_detail(self, state):
        assert state.domain_detail("s3", 0).type == "AT"
