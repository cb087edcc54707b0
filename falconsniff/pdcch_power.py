"""Power analysis of PDCCH candidate locations from soft bits (LLRs)."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .dci import MAX_NCCE, DciLocation
from .pdcch import NOF_AGGREGATION_LEVELS, CceLocation, CceMapEntry

BITS_PER_CCE = 72
MAX_NUM_OF_CCE = MAX_NCCE + 1


def _mean_abs_llr(llr: Sequence[float], cce: int) -> float:
    start = cce * BITS_PER_CCE
    chunk = llr[start:start + BITS_PER_CCE]
    if len(chunk) < BITS_PER_CCE:
        raise ValueError(
            f"LLR buffer of {len(llr)} values is too short for CCE {cce}"
        )
    return sum(abs(value) for value in chunk) / BITS_PER_CCE


def locations_all(
    llr: Sequence[float], nof_cce: int, power_threshold: float
) -> List[CceLocation]:
    """Every candidate location in the control region, with its power.

    Single-CCE candidates carry the mean absolute LLR of their CCE. Larger
    candidates start with power 1 and drop to 0 (and lose sufficient_power)
    as soon as one covered CCE lies below power_threshold. Locations are
    ordered from the highest aggregation level down.
    """
    if nof_cce < 0:
        raise ValueError("nof_cce must not be negative")
    usable = min(nof_cce, MAX_NUM_OF_CCE)
    locations: List[CceLocation] = []
    single: Dict[int, CceLocation] = {}
    for level in range(NOF_AGGREGATION_LEVELS - 1, -1, -1):
        size = 1 << level
        for i in range(usable // size):
            location = CceLocation(L=level, ncce=size * (i % (nof_cce // size)))
            if level == 0:
                location.power = _mean_abs_llr(llr, location.ncce)
                single[location.ncce] = location
            else:
                location.power = 1.0
            locations.append(location)

    for location in locations:
        if location.L == 0:
            continue
        for cce in location.covered_cces:
            if single[cce].power < power_threshold:
                location.power = 0.0
                location.sufficient_power = False
                break
    return locations


def nof_missed_cce_compat(
    locations: Sequence[DciLocation], power_threshold: float
) -> int:
    """Number of distinct CCEs covered by unchecked locations with enough power."""
    missed = set()
    for location in locations:
        if not location.checked and location.power >= power_threshold:
            missed.update(range(location.ncce, location.ncce + (1 << location.L)))
    return len(missed)


def nof_missed_cce(
    cce_map: Sequence[CceMapEntry], nof_cce: int, power_bound: float
) -> int:
    """Number of CCEs with enough power that no used location covers."""
    missed = 0
    for entry in cce_map[:max(nof_cce, 0)]:
        if entry.power < power_bound:
            continue
        if not any(loc is not None and loc.used for loc in entry.locations):
            missed += 1
    return missed


def cce_avg_llr_power(
    llr: Sequence[float],
    cce_map: Sequence[CceMapEntry],
    nof_cce: int,
    power_bound: float,
) -> List[float]:
    """Store the mean absolute LLR of every CCE in the map and return them.

    Every location covering a CCE below power_bound loses sufficient_power.
    """
    powers: List[float] = []
    for cce, entry in enumerate(cce_map[:max(nof_cce, 0)]):
        entry.power = _mean_abs_llr(llr, cce)
        powers.append(entry.power)
        if entry.power < power_bound:
            for location in entry.locations:
                if location is not None:
                    location.sufficient_power = False
    return powers