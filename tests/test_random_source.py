"""Tests for random sources and range scaling."""

from snake_world.random_source import NumpyRandomSource, random_range


class _FixedSource:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


class TestRandomRange:
    def test_low_end(self):
        assert random_range(_FixedSource(0.0), 1, 16) == 1

    def test_high_end_is_exclusive(self):
        assert random_range(_FixedSource(0.9999), 1, 16) == 15

    def test_scaling(self):
        assert random_range(_FixedSource(0.5), 0, 10) == 5


class TestNumpyRandomSource:
    def test_values_in_unit_interval(self):
        source = NumpyRandomSource(seed=0)
        for _ in range(200):
            assert 0.0 <= source.random() < 1.0

    def test_same_seed_same_stream(self):
        a = NumpyRandomSource(seed=42)
        b = NumpyRandomSource(seed=42)
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_range_draws_stay_in_bounds(self):
        source = NumpyRandomSource(seed=3)
        draws = {random_range(source, 1, 16) for _ in range(500)}
        assert min(draws) >= 1
        assert max(draws) <= 15
