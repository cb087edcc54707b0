import pytest

from falconsniff.pdcch import locations_all_map
from falconsniff.pdcch_power import (
    BITS_PER_CCE,
    cce_avg_llr_power,
    locations_all,
    nof_missed_cce,
    nof_missed_cce_compat,
)


def make_llr(levels):
    llr = []
    for level in levels:
        llr.extend([level, -level] * (BITS_PER_CCE // 2))
    return llr


STRONG = 2.0
WEAK = 0.1
THRESHOLD = 1.0


def test_locations_all_counts_every_level():
    locations = locations_all(make_llr([STRONG] * 8), 8, THRESHOLD)
    assert len(locations) == 15
    assert [loc.L for loc in locations] == sorted((loc.L for loc in locations), reverse=True)


def test_single_cce_power_is_mean_absolute_llr():
    levels = [STRONG, 3.0, 0.5, 1.5, STRONG, STRONG, STRONG, STRONG]
    locations = locations_all(make_llr(levels), 8, THRESHOLD)
    singles = {loc.ncce: loc.power for loc in locations if loc.L == 0}
    assert singles == {i: pytest.approx(v) for i, v in enumerate(levels)}


def test_weak_cce_disables_covering_locations():
    levels = [STRONG] * 8
    levels[3] = WEAK
    locations = locations_all(make_llr(levels), 8, THRESHOLD)
    for loc in locations:
        if loc.L == 0:
            continue
        covers_weak = 3 in loc.covered_cces
        assert loc.sufficient_power is (not covers_weak)
        assert loc.power == (0.0 if covers_weak else 1.0)


def test_locations_all_rejects_short_buffer():
    with pytest.raises(ValueError):
        locations_all(make_llr([STRONG] * 3), 8, THRESHOLD)


def test_missed_compat_counts_all_unchecked_cces():
    locations = locations_all(make_llr([STRONG] * 8), 8, THRESHOLD)
    assert nof_missed_cce_compat(locations, THRESHOLD) == 8
    for loc in locations:
        loc.checked = True
    assert nof_missed_cce_compat(locations, THRESHOLD) == 0


def test_missed_compat_ignores_weak_locations():
    locations = locations_all(make_llr([WEAK] * 8), 8, THRESHOLD)
    assert nof_missed_cce_compat(locations, THRESHOLD) == 0


def test_cce_avg_llr_power_sets_map_powers():
    levels = [STRONG, 3.0, WEAK, STRONG]
    _, cce_map = locations_all_map(4, 100, 4)
    powers = cce_avg_llr_power(make_llr(levels), cce_map, 4, THRESHOLD)
    assert powers == [pytest.approx(v) for v in levels]
    assert [entry.power for entry in cce_map] == powers


def test_cce_avg_llr_power_marks_weak_parents():
    levels = [STRONG, STRONG, WEAK, STRONG]
    locations, cce_map = locations_all_map(4, 100, 4)
    cce_avg_llr_power(make_llr(levels), cce_map, 4, THRESHOLD)
    for loc in locations:
        assert loc.sufficient_power is (2 not in loc.covered_cces)


def test_nof_missed_cce_until_a_location_is_used():
    levels = [STRONG, STRONG, WEAK, STRONG]
    locations, cce_map = locations_all_map(4, 100, 4)
    cce_avg_llr_power(make_llr(levels), cce_map, 4, THRESHOLD)
    strong = sum(1 for v in levels if v >= THRESHOLD)
    assert nof_missed_cce(cce_map, 4, THRESHOLD) == strong
    widest = next(loc for loc in locations if loc.ncce == 0 and loc.L == 2)
    widest.used = True
    assert nof_missed_cce(cce_map, 4, THRESHOLD) == 0