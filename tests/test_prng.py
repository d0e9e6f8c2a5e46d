"""Seeded random source: hash vectors, LCG steps, sampling."""

import pytest

from ledgerforge.prng import SeededRandom, fnv1a, lcg_next


@pytest.mark.parametrize(
    "text,expected",
    [("", 0x811C9DC5), ("a", 0xE40C292C), ("foobar", 0xBF9CF968)],
)
def test_fnv1a_known_vectors(text: str, expected: int) -> None:
    assert fnv1a(text) == expected


def test_fnv1a_hashes_utf8_bytes() -> None:
    assert fnv1a("café") != fnv1a("cafe")
    assert 0 <= fnv1a("café") < 2**32


def test_lcg_next_steps() -> None:
    value, state = lcg_next(0)
    assert state == 1013904223
    assert value == 1013904223 / 2**32
    _, state = lcg_next(1)
    assert state == 1015568748


def test_string_seed_is_hashed() -> None:
    assert SeededRandom("abc").state == fnv1a("abc")
    assert SeededRandom(7).state == 7


def test_same_seed_same_stream() -> None:
    a, b = SeededRandom("seed-1"), SeededRandom("seed-1")
    assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]
    assert SeededRandom("seed-1").next() != SeededRandom("seed-2").next()


def test_next_in_unit_interval() -> None:
    rng = SeededRandom("unit")
    for _ in range(1000):
        v = rng.next()
        assert 0.0 <= v < 1.0


def test_range_is_inclusive() -> None:
    rng = SeededRandom("range")
    seen = {rng.range(1, 3) for _ in range(500)}
    assert seen == {1, 2, 3}


def test_uniform_bounds() -> None:
    rng = SeededRandom("uniform")
    for _ in range(500):
        assert 40 <= rng.uniform(40, 150) < 150


def test_weighted_pick_skips_zero_weight() -> None:
    rng = SeededRandom("weights")
    assert {rng.weighted_pick(["never", "always"], [0, 1]) for _ in range(100)} == {"always"}


def test_weighted_pick_rejects_mismatch() -> None:
    rng = SeededRandom("weights")
    with pytest.raises(ValueError):
        rng.weighted_pick(["a", "b"], [1])
    with pytest.raises(ValueError):
        rng.weighted_pick([], [])


def test_sample_without_replacement() -> None:
    rng = SeededRandom("sample")
    items = list(range(20))
    out = rng.sample(items, 8)
    assert len(out) == 8
    assert len(set(out)) == 8
    assert set(out) <= set(items)
    assert items == list(range(20))


def test_sample_caps_at_population() -> None:
    assert sorted(SeededRandom("cap").sample("abc", 10)) == ["a", "b", "c"]


def test_pick_distinct_count_in_range() -> None:
    rng = SeededRandom("distinct")
    for _ in range(100):
        out = rng.pick_distinct(list(range(30)), 2, 5)
        assert 2 <= len(out) <= 5
        assert len(set(out)) == len(out)
