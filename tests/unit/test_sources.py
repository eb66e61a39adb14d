import numpy as np
import pytest

from layernet.core.types import Sample
from layernet.data import available_sources, get_source, register_source
from layernet.data.registry import SourceSpec
from layernet.data.sources import StaticSampleSource, make_sample


@pytest.mark.parametrize("k", [0, 1, 3])
def test_static_source_exhaustion(k):
    source = StaticSampleSource([make_sample([float(i)], [0.0]) for i in range(k)])
    for i in range(k):
        sample, found = source.next()
        assert found
        assert sample.input[0] == float(i)
    for _ in range(3):
        sample, found = source.next()
        assert not found
        assert sample is None
    assert source.offset == k
    assert source.remaining == 0


def test_static_source_iteration_and_len():
    source = StaticSampleSource.from_arrays([[1.0, 2.0], [3.0, 4.0]], [[0.0], [1.0]])
    assert len(source) == 2
    inputs = [s.input.tolist() for s in source]
    assert inputs == [[1.0, 2.0], [3.0, 4.0]]
    assert list(source) == []


def test_static_source_accepts_pairs():
    source = StaticSampleSource([([0.5, 0.5], [1.0])])
    sample, found = source.next()
    assert found
    assert isinstance(sample, Sample)


def test_from_arrays_rejects_length_mismatch():
    with pytest.raises(ValueError):
        StaticSampleSource.from_arrays([[1.0]], [])


def test_samples_are_read_only():
    sample = make_sample([1.0, 2.0], [0.0])
    with pytest.raises(ValueError):
        sample.input[0] = 5.0


def test_builtin_sources_registered():
    names = list(available_sources())
    assert "static" in names
    assert "uniform" in names


def test_uniform_source_is_deterministic():
    a = get_source("uniform", n_samples=4, d_in=3, d_out=2, seed=9)
    b = get_source("uniform", n_samples=4, d_in=3, d_out=2, seed=9)
    assert a.input_dim == 3
    assert a.target_dim == 2
    for sa, sb in zip(a.source, b.source):
        np.testing.assert_array_equal(sa.input, sb.input)
        assert np.all((sa.input >= 0.0) & (sa.input < 1.0))


def test_static_source_from_options():
    spec = get_source(
        "static",
        samples=[{"input": [0.5, 0.5, 0.5], "target": [0.4, 0.4]}],
    )
    assert spec.input_dim == 3
    assert spec.provenance["n_samples"] == 1
    with pytest.raises(ValueError):
        get_source("static", samples=[])
    with pytest.raises(ValueError):
        get_source("static", samples=[([1.0], [0.0]), ([1.0, 2.0], [0.0])])


def test_unknown_source():
    with pytest.raises(KeyError, match="Unknown source"):
        get_source("database")


def test_register_custom_source():
    @register_source("unit-fixture")
    def _fixture(**_):
        return SourceSpec(
            name="unit-fixture",
            source=StaticSampleSource([make_sample([1.0], [1.0])]),
            input_dim=1,
            target_dim=1,
        )

    spec = get_source("unit-fixture")
    assert len(spec.source) == 1
