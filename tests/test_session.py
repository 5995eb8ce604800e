"""
Tests for AnalysisSession and KeyStore.
"""

import json

import numpy as np
import pytest

from pystatlab import AnalysisSession, KeyStore, Sample, generate
from pystatlab.core.exceptions import (
    EmptySampleError,
    ParameterConstraintError,
    ValidationError,
)


class TestLoad:

    def test_successful_load(self):
        session = AnalysisSession()
        assert session.load(Sample.from_array, [1.0, 2.0, 3.0])
        assert session.sample.n == 3
        assert session.error is None

    def test_failed_load_discards_previous_sample(self):
        session = AnalysisSession()
        session.load(Sample.from_array, [1.0, 2.0, 3.0])
        assert not session.load(Sample.from_text, "no numbers at all")
        assert session.sample is None
        assert "no numeric data" in session.error

    def test_error_cleared_by_next_success(self):
        session = AnalysisSession()
        session.load(generate, 'normal', 5)
        assert session.error is not None
        session.load(generate, 'normal', 50, seed=1)
        assert session.error is None
        assert session.sample.source == 'generator:normal'

    def test_file_loader(self, tmp_path):
        path = tmp_path / "values.csv"
        path.write_text("value\n4\n5\n6\n")
        session = AnalysisSession()
        assert session.load(Sample.from_file, path)
        assert session.statistics().mean == 5.0

    def test_quoted_file_loads(self, tmp_path):
        path = tmp_path / "quoted.csv"
        path.write_text('name,value\n"widget,5\nbolt,7\n')
        session = AnalysisSession()
        assert session.load(Sample.from_file, path)
        assert session.sample.n == 2

    def test_file_without_numbers_keeps_contract(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text('name\n"widget\nbolt\n')
        session = AnalysisSession()
        session.load(Sample.from_array, [1.0, 2.0])
        assert not session.load(Sample.from_file, path)
        assert session.sample is None
        assert "no numeric values" in session.error

    def test_other_exceptions_propagate(self, tmp_path):
        session = AnalysisSession()
        with pytest.raises(FileNotFoundError):
            session.load(Sample.from_file, tmp_path / "missing.csv")

    def test_loader_must_return_sample(self):
        session = AnalysisSession()
        assert not session.load(lambda: [1.0, 2.0])
        assert "expected Sample" in session.error

    def test_clear(self, one_to_five):
        session = AnalysisSession()
        session.load(Sample.from_array, one_to_five)
        session.clear()
        assert session.sample is None
        assert session.error is None


class TestDerivedResults:

    @pytest.fixture
    def session(self, one_to_five):
        s = AnalysisSession(family='gamma', bins=4, smoothing=0.5, categories=2)
        s.load(Sample.from_array, one_to_five)
        return s

    def test_statistics(self, session):
        assert session.statistics().median == 3.0

    def test_estimates_use_family(self, session):
        assert session.estimates().family == 'gamma'

    def test_histogram_uses_bins(self, session):
        assert session.histogram().params.counts.shape == (4,)

    def test_density_uses_smoothing(self, session):
        assert session.density().params.bandwidth == pytest.approx(4.0 / 20.0 * 0.5)

    def test_pie_uses_categories(self, session):
        assert len(session.pie().params.labels) == 2

    def test_boxplot(self, session):
        assert session.boxplot().params.median == 3.0

    def test_recomputed_after_reload(self, session):
        first = session.statistics().mean
        session.load(Sample.from_array, [10.0, 20.0])
        assert session.statistics().mean != first

    @pytest.mark.parametrize("method", [
        'statistics', 'estimates', 'histogram', 'boxplot', 'density', 'pie',
    ])
    def test_requires_sample(self, method):
        with pytest.raises(EmptySampleError):
            getattr(AnalysisSession(), method)()


class TestConfigure:

    def test_updates(self):
        session = AnalysisSession()
        session.configure(family='Beta', bins=20, smoothing=2.0, categories=3)
        assert session.family == 'beta'
        assert session.bins == 20
        assert session.smoothing == 2.0
        assert session.categories == 3

    def test_unknown_setting(self):
        with pytest.raises(ValidationError, match="unknown setting"):
            AnalysisSession().configure(colour='red')

    def test_invalid_value_applies_nothing(self):
        session = AnalysisSession()
        with pytest.raises(ParameterConstraintError):
            session.configure(bins=20, smoothing=0.0)
        assert session.bins == 10

    def test_invalid_family(self):
        with pytest.raises(ValidationError):
            AnalysisSession(family='weibull')

    def test_repr(self):
        assert repr(AnalysisSession()).startswith("AnalysisSession(n=0, family='normal'")


class TestKeyStore:

    def test_missing_file_reads_empty(self, tmp_path):
        assert KeyStore(tmp_path / "store.json").get() is None

    def test_set_and_get(self, tmp_path):
        store = KeyStore(tmp_path / "nested" / "store.json")
        store.set("  sk-abc123  ")
        assert store.get() == "sk-abc123"
        data = json.loads((tmp_path / "nested" / "store.json").read_text())
        assert data == {"dashscopeApiKey": "sk-abc123"}

    @pytest.mark.parametrize("empty", ["", "   ", None])
    def test_empty_value_removes_key(self, tmp_path, empty):
        store = KeyStore(tmp_path / "store.json")
        store.set("sk-abc123")
        store.set("other", key="theme")
        store.set(empty)
        assert store.get() is None
        assert store.get("theme") == "other"

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError, match="not a valid JSON store"):
            KeyStore(path).get()

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert KeyStore().path == tmp_path / ".pystatlab" / "store.json"
