"""Uplink shared-channel grant evaluation: PRB allocation and MCS tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union

from .pdsch import Modulation

# Transport block sizes for TBS index 32A, indexed by number of PRBs minus one.
TBS_TABLE_32A = (
    904, 1864, 2792, 3752, 4584, 5544, 6456, 7480, 8248, 9144, 10296, 11064, 12216, 12960,
    14112, 14688, 15840, 16416, 17568, 18336, 19848, 20616, 21384, 22152, 22920, 24496, 25456,
    26416, 27376, 27376, 28336, 29296, 30576, 31704, 32856, 32856, 34008, 35160, 36696, 36696,
    37888, 39232, 40576, 40576, 42368, 42368, 43816, 43816, 45352, 46888, 46888, 48936, 48936,
    51024, 51024, 52752, 52752, 52752, 55056, 55056, 57336, 57336, 59256, 59256, 59256, 61664,
    61664, 63776, 63776, 63776, 66592, 66592, 68808, 68808, 68808, 71112, 71112, 73712, 73712,
    73712, 75376, 76208, 76208, 78704, 78704, 78704, 81176, 81176, 81176, 84760, 84760, 84760,
    87936, 87936, 87936, 87936, 90816, 90816, 90816, 93800, 93800, 93800, 93800, 97896, 97896,
    97896, 97896, 101840, 101840, 101840,
)

_MAX_MCS = 28
_MCS_CQI_ONLY = 29
_CQI_ONLY_MAX_PRB = 4


class HoppingMode(IntEnum):
    """PUSCH frequency hopping modes signalled in an uplink DCI."""

    DISABLED = -1
    QUART = 0
    QUART_NEG = 1
    HALF = 2
    TYPE2 = 3


@dataclass(frozen=True)
class UlMcs:
    """Modulation and transport block size selected for an uplink grant.

    Either tbs_idx names the row of the TBS table to look up, or tbs holds
    the size directly. rv is None when the DCI's redundancy version stands.
    """

    mod: Modulation
    tbs_idx: Optional[int] = None
    tbs: Optional[int] = None
    rv: Optional[int] = None


@dataclass(frozen=True)
class UlPrbAllocation:
    """PRBs of an uplink grant in both slots and the hopping type applied."""

    l_prb: int
    n_prb: Tuple[int, int]
    freq_hopping: int


def ul_prb_allocation(
    l_prb: int,
    n_prb_1: int,
    freq_hop: Union[HoppingMode, int],
    n_rb_ho: int,
    nof_prb: int,
) -> UlPrbAllocation:
    """PRB positions for both slots from the decoded resource indication."""
    mode = HoppingMode(freq_hop)
    if n_rb_ho % 2:
        n_rb_ho += 1

    if mode in (HoppingMode.DISABLED, HoppingMode.TYPE2):
        n_prb = (n_prb_1, n_prb_1)
        hopping = 0 if mode == HoppingMode.DISABLED else 2
    else:
        n_rb_pusch = nof_prb - n_rb_ho - (nof_prb % 2)
        if n_prb_1 < n_rb_ho // 2:
            raise ValueError(
                f"invalid frequency hopping parameters: offset {n_rb_ho}, n_prb_1 {n_prb_1}"
            )
        if n_rb_pusch <= 0:
            raise ValueError(f"no PUSCH resource blocks left (n_rb_pusch={n_rb_pusch})")
        quarter = n_rb_pusch // 4
        if mode == HoppingMode.QUART:
            second = (quarter + n_prb_1) % n_rb_pusch
        elif mode == HoppingMode.QUART_NEG:
            if n_prb_1 < quarter:
                second = n_rb_pusch + n_prb_1 - quarter
            else:
                second = n_prb_1 - quarter
        else:
            second = (n_rb_pusch // 2 + n_prb_1) % n_rb_pusch
        n_prb = (n_prb_1, second)
        hopping = 1

    if any(start + l_prb > nof_prb for start in n_prb):
        raise ValueError(
            f"allocation {n_prb} with {l_prb} PRBs exceeds {nof_prb} PRBs"
        )
    return UlPrbAllocation(l_prb=l_prb, n_prb=n_prb, freq_hopping=hopping)


def _special_mcs(
    mcs_idx: int, l_prb: int, cqi_request: bool, last: Optional[UlMcs]
) -> UlMcs:
    if mcs_idx == _MCS_CQI_ONLY and cqi_request and l_prb <= _CQI_ONLY_MAX_PRB:
        return UlMcs(mod=Modulation.QPSK, tbs=0, rv=1)
    if last is None:
        raise ValueError(f"mcs_idx={mcs_idx} needs the previous transmission's MCS")
    return UlMcs(mod=last.mod, tbs_idx=last.tbs_idx, tbs=last.tbs, rv=mcs_idx - _MAX_MCS)


def _check_mcs(mcs_idx: int) -> None:
    if mcs_idx < 0:
        raise ValueError(f"invalid MCS index {mcs_idx}")


def ul_fill_mcs(
    mcs_idx: int, l_prb: int, cqi_request: bool = False, last: Optional[UlMcs] = None
) -> UlMcs:
    """Modulation and TBS index from the 64QAM uplink MCS table."""
    _check_mcs(mcs_idx)
    if mcs_idx > _MAX_MCS:
        return _special_mcs(mcs_idx, l_prb, cqi_request, last)
    if mcs_idx < 11:
        return UlMcs(mod=Modulation.QPSK, tbs_idx=mcs_idx)
    if mcs_idx < 21:
        return UlMcs(mod=Modulation.QAM16, tbs_idx=mcs_idx - 1)
    return UlMcs(mod=Modulation.QAM64, tbs_idx=mcs_idx - 2)


def ul_fill_mcs_256(
    mcs_idx: int, l_prb: int, cqi_request: bool = False, last: Optional[UlMcs] = None
) -> UlMcs:
    """Modulation and TBS index from the 256QAM uplink MCS table."""
    _check_mcs(mcs_idx)
    if mcs_idx > _MAX_MCS:
        return _special_mcs(mcs_idx, l_prb, cqi_request, last)
    if mcs_idx < 6:
        return UlMcs(mod=Modulation.QPSK, tbs_idx=mcs_idx * 2)
    if mcs_idx < 10:
        return UlMcs(mod=Modulation.QAM16, tbs_idx=mcs_idx + 5)
    if mcs_idx < 14:
        return UlMcs(mod=Modulation.QAM16, tbs_idx=mcs_idx + 6)
    if mcs_idx < 19:
        return UlMcs(mod=Modulation.QAM64, tbs_idx=mcs_idx + 6)
    if mcs_idx < 23:
        return UlMcs(mod=Modulation.QAM64, tbs_idx=mcs_idx + 7)
    if mcs_idx < 26:
        return UlMcs(mod=Modulation.QAM256, tbs_idx=mcs_idx + 7)
    if mcs_idx == 26 and 0 < l_prb <= len(TBS_TABLE_32A):
        return UlMcs(mod=Modulation.QAM256, tbs=TBS_TABLE_32A[l_prb - 1])
    return UlMcs(mod=Modulation.QAM256, tbs_idx=mcs_idx + 6)