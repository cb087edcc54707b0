"""Downlink shared-channel helpers: MIMO configuration and size tables."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Tuple

from .dci import DciFormat

FORMAT1C_TBS_TABLE = (
    40, 56, 72, 120, 136, 144, 176, 208, 224, 256, 280,
    296, 328, 336, 392, 488, 552, 600, 632, 696, 776, 840,
    904, 1000, 1064, 1128, 1224, 1288, 1384, 1480, 1608, 1736,
)


class TxScheme(Enum):
    """Downlink transmission schemes."""

    PORT0 = "port0"
    DIVERSITY = "diversity"
    SPATIALMUX = "spatialmux"
    CDD = "cdd"


class Modulation(IntEnum):
    """Modulation schemes, in protocol order."""

    BPSK = 0
    QPSK = 1
    QAM16 = 2
    QAM64 = 3
    QAM256 = 4

    @property
    def bits_per_symbol(self) -> int:
        return (1, 2, 4, 6, 8)[self.value]


class MimoConfigError(ValueError):
    """The DCI cannot be mapped to a supported MIMO configuration.

    stage names the step that failed: "type", "pmi" or "layers".
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(message)
        self.stage = stage


def config_mimo_type(nof_ports: int, fmt: DciFormat, nof_tb: int, pinfo: int) -> TxScheme:
    """Transmission scheme implied by the DCI format."""
    if fmt in (DciFormat.FORMAT1, DciFormat.FORMAT1A, DciFormat.FORMAT1C):
        return TxScheme.PORT0 if nof_ports == 1 else TxScheme.DIVERSITY
    if fmt == DciFormat.FORMAT2:
        if nof_tb == 1 and pinfo == 0:
            return TxScheme.DIVERSITY
        return TxScheme.SPATIALMUX
    if fmt == DciFormat.FORMAT2A:
        if nof_tb == 1 and pinfo == 0:
            return TxScheme.DIVERSITY
        return TxScheme.CDD
    raise MimoConfigError("type", f"transmission mode not supported for {fmt.name}")


def config_mimo_pmi(tx_scheme: TxScheme, nof_tb: int, pinfo: int) -> int:
    """Precoding matrix index from the precoding information field."""
    if tx_scheme != TxScheme.SPATIALMUX:
        return 0
    if nof_tb == 1:
        if 0 < pinfo < 5:
            return pinfo - 1
        raise MimoConfigError("pmi", f"not implemented (nof_tb={nof_tb}, pinfo={pinfo})")
    if pinfo == 2:
        raise MimoConfigError("pmi", f"not implemented codebook index (pinfo={pinfo})")
    if pinfo > 2:
        raise MimoConfigError("pmi", f"reserved codebook index (pinfo={pinfo})")
    return pinfo % 2


def config_mimo_layers(tx_scheme: TxScheme, nof_tb: int, nof_ports: int) -> int:
    """Number of MIMO layers for the scheme and transport block count."""
    if tx_scheme == TxScheme.PORT0:
        if nof_tb != 1:
            raise MimoConfigError("layers", f"{nof_tb} transport blocks for single antenna")
        return 1
    if tx_scheme == TxScheme.DIVERSITY:
        if nof_tb != 1:
            raise MimoConfigError("layers", f"{nof_tb} transport blocks for transmit diversity")
        return nof_ports
    if tx_scheme == TxScheme.SPATIALMUX:
        if nof_tb in (1, 2):
            return nof_tb
        raise MimoConfigError("layers", f"{nof_tb} transport blocks for spatial multiplexing")
    if nof_tb != 2:
        raise MimoConfigError("layers", f"{nof_tb} transport blocks for CDD")
    return 2


def config_mimo(nof_ports: int, fmt: DciFormat, nof_tb: int, pinfo: int) -> Tuple[TxScheme, int, int]:
    """Scheme, precoding matrix index and layer count for a downlink DCI."""
    scheme = config_mimo_type(nof_ports, fmt, nof_tb, pinfo)
    pmi = config_mimo_pmi(scheme, nof_tb, pinfo)
    layers = config_mimo_layers(scheme, nof_tb, nof_ports)
    return scheme, pmi, layers


def format1c_tbs(mcs_idx: int) -> int:
    """Transport block size of a format 1C grant."""
    if not 0 <= mcs_idx < len(FORMAT1C_TBS_TABLE):
        raise ValueError(f"invalid mcs_idx={mcs_idx} in format 1C")
    return FORMAT1C_TBS_TABLE[mcs_idx]


def cqi_subband_size(nof_prb: int) -> int:
    """Subband size for higher-layer configured CQI reports."""
    if nof_prb < 7:
        raise ValueError(f"nof_prb is invalid (< 7): {nof_prb}")
    if nof_prb <= 26:
        return 4
    if nof_prb <= 63:
        return 6
    if nof_prb <= 110:
        return 8
    raise ValueError(f"nof_prb is invalid (> 110): {nof_prb}")


def cqi_no_subbands(nof_prb: int) -> int:
    """Number of CQI subbands, or 0 when the bandwidth is invalid."""
    try:
        size = cqi_subband_size(nof_prb)
    except ValueError:
        return 0
    return -(-nof_prb // size)