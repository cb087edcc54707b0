"""Conversion of unpacked DCI messages and random-access grants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple

from .dci import DciFormat

CRNTI_START = 0x000B
CRNTI_END = 0xFFF3

RAR_GRANT_LEN = 20
HOP_DISABLED = -1
_HOP_ENABLED = 1
_RAR_DAI = 3

# Field widths of a random-access response grant, in transmission order.
_RAR_FIELDS = (
    ("hopping_flag", 1),
    ("rba", 10),
    ("trunc_mcs", 4),
    ("tpc_pusch", 3),
    ("ul_delay", 1),
    ("cqi_request", 1),
)


def is_crnti(rnti: int) -> bool:
    """Whether rnti falls into the C-RNTI range."""
    return CRNTI_START <= rnti <= CRNTI_END


@dataclass(frozen=True)
class RanTb:
    """Per-transport-block fields of an unpacked DCI."""

    mcs_idx: int = 0
    rv: int = 0
    ndi: bool = False
    cw_idx: int = 0

    @property
    def enabled(self) -> bool:
        """A block is disabled when it carries MCS 0 with redundancy version 1."""
        return _tb_enabled(self.mcs_idx, self.rv)


def _tb_enabled(mcs_idx: int, rv: int) -> bool:
    return not (mcs_idx == 0 and rv == 1)


def _two_blocks() -> Tuple[RanTb, RanTb]:
    return (RanTb(), RanTb())


@dataclass(frozen=True)
class RanDlDci:
    """Downlink DCI as produced by the message unpacker."""

    rnti: int = 0
    format: DciFormat = DciFormat.FORMAT1
    alloc_type: int = 0
    tb: Tuple[RanTb, RanTb] = field(default_factory=_two_blocks)
    pid: int = 0
    tb_cw_swap: bool = False
    sram_id: int = 0
    pinfo: int = 0
    pconf: bool = False
    power_offset: bool = False
    tpc_pucch: int = 0
    is_ra_order: bool = False
    ra_preamble: int = 0
    ra_mask_idx: int = 0

    def __post_init__(self) -> None:
        if len(self.tb) != 2:
            raise ValueError("a downlink DCI carries exactly two transport blocks")


@dataclass(frozen=True)
class DlDci:
    """Flattened downlink DCI used for tracing and grant evaluation."""

    alloc_type: int = 0
    mcs_idx: int = 0
    rv_idx: int = 0
    ndi: bool = False
    mcs_idx_1: int = 0
    rv_idx_1: int = 0
    ndi_1: bool = False
    harq_process: int = 0
    tb_cw_swap: bool = False
    sram_id: int = 0
    pinfo: int = 0
    pconf: bool = False
    power_offset: bool = False
    tpc_pucch: int = 0
    is_ra_order: bool = False
    ra_preamble: int = 0
    ra_mask_idx: int = 0
    dci_is_1a: bool = False
    dci_is_1c: bool = False
    tb_en: Tuple[bool, bool] = (True, True)

    @classmethod
    def from_ran(cls, ran: RanDlDci) -> "DlDci":
        """Build the flattened form from an unpacked downlink DCI."""
        tb0, tb1 = ran.tb
        return cls(
            alloc_type=ran.alloc_type,
            mcs_idx=tb0.mcs_idx,
            rv_idx=tb0.rv,
            ndi=tb0.ndi,
            mcs_idx_1=tb1.mcs_idx,
            rv_idx_1=tb1.rv,
            ndi_1=tb1.ndi,
            harq_process=ran.pid,
            tb_cw_swap=ran.tb_cw_swap,
            sram_id=ran.sram_id,
            pinfo=ran.pinfo,
            pconf=ran.pconf,
            power_offset=ran.power_offset,
            tpc_pucch=ran.tpc_pucch,
            is_ra_order=ran.is_ra_order,
            ra_preamble=ran.ra_preamble,
            ra_mask_idx=ran.ra_mask_idx,
            dci_is_1a=ran.format == DciFormat.FORMAT1A,
            dci_is_1c=ran.format == DciFormat.FORMAT1C,
            tb_en=(_tb_enabled(tb0.mcs_idx, tb0.rv), _tb_enabled(tb1.mcs_idx, tb1.rv)),
        )


@dataclass(frozen=True)
class RanUlDci:
    """Uplink DCI as produced by the message unpacker (format 0)."""

    rnti: int = 0
    freq_hop_fl: int = HOP_DISABLED
    riv: int = 0
    tb: RanTb = field(default_factory=RanTb)
    n_dmrs: int = 0
    cqi_request: bool = False
    tpc_pusch: int = 0
    dai: int = 0


@dataclass(frozen=True)
class UlDci:
    """Flattened uplink DCI used for tracing."""

    freq_hop_fl: int = HOP_DISABLED
    riv: int = 0
    mcs_idx: int = 0
    rv_idx: int = 0
    n_dmrs: int = 0
    ndi: bool = False
    cqi_request: bool = False
    tpc_pusch: int = 0

    @classmethod
    def from_ran(cls, ran: RanUlDci) -> "UlDci":
        """Build the flattened form from an unpacked uplink DCI."""
        return cls(
            freq_hop_fl=ran.freq_hop_fl,
            riv=ran.riv,
            mcs_idx=ran.tb.mcs_idx,
            rv_idx=ran.tb.rv,
            n_dmrs=ran.n_dmrs,
            ndi=ran.tb.ndi,
            cqi_request=ran.cqi_request,
            tpc_pusch=ran.tpc_pusch,
        )


@dataclass(frozen=True)
class RarGrant:
    """Uplink grant carried in a random-access response."""

    hopping_flag: bool = False
    rba: int = 0
    trunc_mcs: int = 0
    tpc_pusch: int = 0
    ul_delay: bool = False
    cqi_request: bool = False

    @classmethod
    def unpack(cls, bits: Sequence[int]) -> "RarGrant":
        """Read the grant from its bits, most significant bit first."""
        if len(bits) < RAR_GRANT_LEN:
            raise ValueError(
                f"RAR grant needs {RAR_GRANT_LEN} bits, got {len(bits)}"
            )
        values = {}
        pos = 0
        for name, width in _RAR_FIELDS:
            value = 0
            for bit in bits[pos:pos + width]:
                value = (value << 1) | (1 if bit else 0)
            values[name] = value
            pos += width
        return cls(
            hopping_flag=bool(values["hopping_flag"]),
            rba=values["rba"],
            trunc_mcs=values["trunc_mcs"],
            tpc_pusch=values["tpc_pusch"],
            ul_delay=bool(values["ul_delay"]),
            cqi_request=bool(values["cqi_request"]),
        )

    def to_bits(self) -> list:
        """Write the grant as bits, most significant bit first."""
        bits = []
        for name, width in _RAR_FIELDS:
            value = int(getattr(self, name))
            if not 0 <= value < (1 << width):
                raise ValueError(f"{name}={value} does not fit in {width} bits")
            bits.extend((value >> (width - 1 - i)) & 1 for i in range(width))
        return bits


def rar_grant_to_ul_dci(rar: RarGrant) -> RanUlDci:
    """Turn a random-access grant into the equivalent uplink DCI."""
    return RanUlDci(
        freq_hop_fl=_HOP_ENABLED if rar.hopping_flag else HOP_DISABLED,
        riv=rar.rba,
        tb=RanTb(mcs_idx=rar.trunc_mcs, rv=0),
        dai=_RAR_DAI,
    )