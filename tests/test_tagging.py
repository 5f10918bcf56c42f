"""Tests for per-pass domain tagging."""

from synthase_plot.layout.tagging import domains_frame, tag_domains


class TestTagDomains:
    def test_back_references(self, nested):
        tagged = tag_domains(nested)
        assert list(tagged) == ["s1", "s2", "s3", "s4"]
        first, second = tagged["s1"]
        assert first.parent == "s1"
        assert first.p_length == 300
        assert (first.index, second.index) == (0, 1)
        assert first.key == "s1:0"
        assert first.type == "KS"

    def test_canonical_domains_untouched(self, nested):
        tag_domains(nested)
        domain = nested.synthases["s1"].domains[0]
        assert not hasattr(domain, "parent")
        assert "parent" not in domain.to_dict()

    def test_to_dict_adds_parent_fields(self, nested):
        d = tag_domains(nested)["s4"][0].to_dict()
        assert d["parent"] == "s4"
        assert d["pLength"] == 100
        assert d["type"] == "KR"


class TestDomainsFrame:
    def test_one_row_per_domain(self, nested):
        df = domains_frame(tag_domains(nested))
        assert len(df) == 6
        assert list(df.columns[:3]) == ["parent", "index", "type"]
        assert df.loc[0, "domain"] == "PKS_KS"
        assert df["parent"].tolist() == ["s1", "s1", "s2", "s2", "s3", "s4"]

    def test_empty(self):
        from synthase_plot.core.dataset import Dataset

        df = domains_frame(tag_domains(Dataset()))
        assert df.empty
        assert "pLength" in df.columns
