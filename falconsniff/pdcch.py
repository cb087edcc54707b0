"""PDCCH search-space checks and the map from CCEs to candidate locations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .dci import DciLocation

NOF_AGGREGATION_LEVELS = 4
_YK_MULTIPLIER = 39827
_YK_MODULUS = 65537
# Number of UE-specific candidates per aggregation level (1, 2, 4, 8 CCEs).
_UE_CANDIDATES = (6, 6, 2, 2)
_COMMON_SPACE_CCES = 16


class CceLocation(DciLocation):
    """A candidate location inside the PDCCH control region."""

    @property
    def size(self) -> int:
        """Number of CCEs the candidate spans."""
        return 1 << self.L

    @property
    def covered_cces(self) -> range:
        """Indices of the CCEs the candidate occupies."""
        return range(self.ncce, self.ncce + self.size)


def _empty_levels() -> List[Optional[CceLocation]]:
    return [None] * NOF_AGGREGATION_LEVELS


@dataclass
class CceMapEntry:
    """For one CCE: the candidate covering it at each aggregation level."""

    locations: List[Optional[CceLocation]] = field(default_factory=_empty_levels)
    power: float = 0.0


def ue_locations_check(nof_cce: int, nsubframe: int, rnti: int, this_ncce: int) -> bool:
    """Whether a DCI for rnti may start at CCE this_ncce in this subframe.

    Both the UE-specific and the common search space are considered.
    """
    yk = rnti
    for _ in range(nsubframe + 1):
        yk = (_YK_MULTIPLIER * yk) % _YK_MODULUS

    for level in range(NOF_AGGREGATION_LEVELS - 1, -1, -1):
        size = 1 << level
        if nof_cce < size:
            continue
        slots = nof_cce // size
        for i in range(_UE_CANDIDATES[level]):
            ncce = size * ((yk + i) % slots)
            if ncce + size <= nof_cce and ncce == this_ncce:
                return True

    for level in (3, 2):
        size = 1 << level
        for i in range(min(nof_cce, _COMMON_SPACE_CCES) // size):
            ncce = size * (i % (nof_cce // size))
            if ncce + size <= nof_cce and ncce == this_ncce:
                return True
    return False


def locations_all_map(
    nof_cce: int, max_candidates: int, max_cce: int
) -> Tuple[List[CceLocation], List[CceMapEntry]]:
    """Every possible candidate location, regardless of RNTI, plus a CCE map.

    Locations are ordered from the highest aggregation level down. The map
    holds max_cce entries; entry n lists the candidate covering CCE n at
    each level.
    """
    if nof_cce < 0 or max_cce < 0 or max_candidates < 0:
        raise ValueError("counts must not be negative")
    cce_map = [CceMapEntry() for _ in range(max_cce)]
    locations: List[CceLocation] = []
    usable = min(nof_cce, max_cce)
    for level in range(NOF_AGGREGATION_LEVELS - 1, -1, -1):
        size = 1 << level
        for i in range(usable // size):
            if len(locations) >= max_candidates:
                break
            location = CceLocation(L=level, ncce=size * (i % (nof_cce // size)))
            for cce in location.covered_cces:
                cce_map[cce].locations[level] = location
            locations.append(location)
    return locations, cce_map


def uncheck_locations(locations: Sequence[DciLocation]) -> int:
    """Clear the checked flag of every location; return how many there were."""
    for location in locations:
        location.checked = False
    return len(locations)