import pytest

from video_lab.errors import InvalidSeedError
from video_lab.planning.models import Brief
from video_lab.variation.source import VariationSource, brief_fingerprint, validate_seed, variation_value


def _draws(source, count=8):
    return [source.next_value() for _ in range(count)]


def test_variation_value_is_pure():
    assert variation_value("key", 7, 3) == variation_value("key", 7, 3)
    assert variation_value("key", 7, 3) != variation_value("key", 7, 4)


def test_same_key_and_seed_replay_the_same_sequence():
    assert _draws(VariationSource("brief", 1)) == _draws(VariationSource("brief", 1))


def test_different_seeds_diverge():
    assert _draws(VariationSource("brief", 1)) != _draws(VariationSource("brief", 2))


def test_fork_ignores_parent_progress():
    parent = VariationSource("brief", 3)
    before = _draws(parent.fork("script"))
    _draws(parent, 5)
    after = _draws(parent.fork("script"))
    assert before == after
    assert before != _draws(parent.fork("imagery"))


def test_fresh_source_starts_at_index_zero():
    source = VariationSource("brief", 1)
    source.next_value()
    assert source.draws == 1
    assert VariationSource("brief", 1).draws == 0


def test_pick_returns_catalog_member():
    source = VariationSource("brief", 1)
    options = ("a", "b", "c")
    for _ in range(20):
        assert source.pick(options) in options


def test_between_is_inclusive():
    source = VariationSource("brief", 1)
    seen = {source.between(3, 4) for _ in range(200)}
    assert seen == {3, 4}


def test_sample_is_distinct_subset():
    source = VariationSource("brief", 5)
    options = ["a", "b", "c", "d", "e", "f"]
    picked = source.sample(options, 4)
    assert len(picked) == 4
    assert len(set(picked)) == 4
    assert set(picked) <= set(options)


def test_sample_dedupes_and_clamps():
    source = VariationSource("brief", 5)
    picked = source.sample(["x", "x", "y"], 10)
    assert sorted(picked) == ["x", "y"]


def test_shuffled_is_a_permutation():
    source = VariationSource("brief", 9)
    options = list(range(10))
    assert sorted(source.shuffled(options)) == options


@pytest.mark.parametrize("call", [
    lambda s: s.pick([]),
    lambda s: s.sample([], 2),
    lambda s: s.between(5, 4),
    lambda s: s.index(0),
])
def test_empty_ranges_are_programming_errors(call):
    with pytest.raises(ValueError):
        call(VariationSource("brief", 1))


@pytest.mark.parametrize("seed", [0, -1, True, 1.5, "3", None, float("inf")])
def test_out_of_domain_seeds_rejected(seed):
    with pytest.raises(InvalidSeedError):
        validate_seed(seed)
    with pytest.raises(ValueError):
        VariationSource("brief", seed)


def test_large_seed_accepted():
    assert validate_seed(10**30) == 10**30


def test_fingerprint_tracks_brief_content():
    base = Brief(topic="Notion", target_audience="Solo creators")
    assert brief_fingerprint(base) == brief_fingerprint(Brief(topic="  Notion ", target_audience="Solo   creators"))
    assert brief_fingerprint(base) != brief_fingerprint(Brief(topic="Obsidian", target_audience="Solo creators"))
