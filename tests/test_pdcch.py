import pytest

from falconsniff.pdcch import (
    CceLocation,
    CceMapEntry,
    locations_all_map,
    ue_locations_check,
    uncheck_locations,
)


@pytest.mark.parametrize("rnti", [0x1234, 0x0B, 0xFFF3])
@pytest.mark.parametrize("ncce", [0, 4, 8, 12])
def test_common_search_space_always_matches(rnti, ncce):
    assert ue_locations_check(20, 3, rnti, ncce) is True


def test_ncce_beyond_region_never_matches():
    assert all(not ue_locations_check(10, sf, 100, 10) for sf in range(10))


def test_empty_region_never_matches():
    assert ue_locations_check(0, 0, 100, 0) is False


def test_tiny_region_all_cces_reachable():
    assert all(ue_locations_check(2, 0, 1234, n) for n in range(2))


def test_check_is_deterministic():
    first = [ue_locations_check(40, 5, 0x4321, n) for n in range(40)]
    second = [ue_locations_check(40, 5, 0x4321, n) for n in range(40)]
    assert first == second


def test_map_covers_every_cce_at_every_level():
    locations, cce_map = locations_all_map(16, 100, 32)
    for cce in range(16):
        for level in range(4):
            loc = cce_map[cce].locations[level]
            assert loc is not None
            assert cce in loc.covered_cces
            assert loc.L == level
    assert all(entry.locations == [None] * 4 for entry in cce_map[16:])


def test_locations_ordered_from_highest_level():
    locations, _ = locations_all_map(16, 100, 32)
    levels = [loc.L for loc in locations]
    assert levels == sorted(levels, reverse=True)
    assert locations[0].L == 3 and locations[0].ncce == 0
    pairs = {(loc.L, loc.ncce) for loc in locations}
    assert len(pairs) == len(locations)


def test_level_zero_has_one_location_per_cce():
    locations, _ = locations_all_map(12, 100, 32)
    assert sorted(loc.ncce for loc in locations if loc.L == 0) == list(range(12))


def test_max_candidates_caps_result():
    locations, _ = locations_all_map(16, 5, 32)
    assert len(locations) == 5


def test_max_cce_limits_region():
    locations, cce_map = locations_all_map(40, 100, 16)
    assert len(cce_map) == 16
    assert all(max(loc.covered_cces) < 16 for loc in locations)


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        locations_all_map(-1, 10, 10)


def test_uncheck_locations_clears_flags():
    locations = [CceLocation(L=1, ncce=2, checked=True), CceLocation(checked=True)]
    assert uncheck_locations(locations) == len(locations)
    assert not any(loc.checked for loc in locations)


def test_map_entry_default_power():
    entry = CceMapEntry()
    assert entry.power == 0.0 and entry.locations == [None] * 4