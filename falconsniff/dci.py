"""DCI formats, candidate locations, hex helpers and the RNTI histogram."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Deque, Iterable, List, Sequence

MAX_AGGREGATION_LEVEL = 3
MAX_NCCE = 87
RNTI_SPACE = 1 << 16


class DciFormat(IntEnum):
    """Downlink control information formats, in protocol order."""

    FORMAT0 = 0
    FORMAT1 = 1
    FORMAT1A = 2
    FORMAT1B = 3
    FORMAT1C = 4
    FORMAT1D = 5
    FORMAT2 = 6
    FORMAT2A = 7
    FORMAT2B = 8


@dataclass
class DciLocation:
    """A PDCCH candidate: aggregation level exponent and first CCE index."""

    L: int = 0
    ncce: int = 0
    power: float = 0.0
    used: bool = False
    occupied: bool = False
    checked: bool = False
    sufficient_power: bool = True

    def is_valid(self) -> bool:
        """Whether level and CCE index lie within the allowed ranges."""
        return self.L <= MAX_AGGREGATION_LEVEL and self.ncce <= MAX_NCCE


def sprint_hex(bits: Sequence[int], nof_bits: int) -> str:
    """Pack the first nof_bits bits (MSB first) into a lower-case hex string.

    A trailing partial byte is padded with zero bits on the right.
    """
    if nof_bits < 0 or nof_bits > len(bits):
        raise ValueError(f"cannot take {nof_bits} bits from {len(bits)}")
    out = []
    for start in range(0, nof_bits, 8):
        chunk = bits[start:min(start + 8, nof_bits)]
        value = 0
        for bit in chunk:
            value = (value << 1) | (1 if bit else 0)
        value <<= 8 - len(chunk)
        out.append(f"{value:02x}")
    return "".join(out)


def sscan_hex(text: str, nof_bits: int) -> List[int]:
    """Unpack nof_bits bits (MSB first) from a hex string."""
    needed = 2 * ((nof_bits + 7) // 8)
    if needed > len(text):
        raise ValueError(
            f"hex string too short ({len(text)} chars) for {nof_bits} bits"
        )
    result: List[int] = []
    for pos in range(0, needed, 2):
        byte = int(text[pos:pos + 2], 16)
        take = min(8, nof_bits - len(result))
        result.extend((byte >> (7 - i)) & 1 for i in range(take))
    return result


def index_of_format(fmt: DciFormat, formats: Iterable[DciFormat]) -> int:
    """Position of fmt in formats, or -1 when it is absent."""
    for idx, candidate in enumerate(formats):
        if candidate == fmt:
            return idx
    return -1


class RntiHistogram:
    """Counts RNTI occurrences over a sliding window of recent observations."""

    def __init__(self, threshold: int, depth: int) -> None:
        if depth <= 0:
            raise ValueError("history depth must be positive")
        self.threshold = threshold
        self.depth = depth
        self._counts: Counter = Counter()
        self._history: Deque[int] = deque()
        self.active_users = 0

    @property
    def ready(self) -> bool:
        """True once the history window has been filled."""
        return len(self._history) == self.depth

    def add_rnti(self, rnti: int) -> None:
        """Record an RNTI, dropping the oldest one once the window is full."""
        if not 0 <= rnti < RNTI_SPACE:
            raise ValueError(f"RNTI out of range: {rnti}")
        if self.ready:
            old = self._history.popleft()
            if self._counts[old] == self.threshold:
                self.active_users -= 1
            self._counts[old] -= 1
            if self._counts[old] <= 0:
                del self._counts[old]
        self._history.append(rnti)
        self._counts[rnti] += 1
        if self._counts[rnti] == self.threshold:
            self.active_users += 1

    def get_occurrence(self, rnti: int) -> int:
        """How often rnti appears in the current window."""
        return self._counts.get(rnti, 0)