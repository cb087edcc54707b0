# falconsniff

Pure-Python building blocks for passive LTE control-channel analysis. The
package holds the bookkeeping that surrounds a PDCCH blind decoder: where
DCI candidates may sit, which CCEs carry power, which RNTIs recur, and how
decoded DCI fields turn into MIMO settings, PRB allocations and MCS choices.

## Modules

- `falconsniff.dci` – `DciFormat`, the candidate location `DciLocation`
  (with `is_valid()`), `sprint_hex` / `sscan_hex` for packing DCI payload
  bits into hex text and back, `index_of_format`, and `RntiHistogram`, a
  sliding window of recent RNTIs with `add_rnti`, `get_occurrence`,
  `active_users` and `ready`.
- `falconsniff.pdcch` – `ue_locations_check` (is a CCE index a valid start
  for an RNTI's UE-specific or common search space), `locations_all_map`
  (every candidate location plus a per-CCE map of `CceMapEntry` objects),
  `uncheck_locations`, and the `CceLocation` class.
- `falconsniff.pdcch_power` – per-CCE power from soft bits (LLRs):
  `locations_all`, `cce_avg_llr_power`, `nof_missed_cce` and
  `nof_missed_cce_compat`.
- `falconsniff.dci_convert` – frozen dataclasses for unpacked DCI
  (`RanTb`, `RanDlDci`, `RanUlDci`), their flattened forms via
  `DlDci.from_ran` and `UlDci.from_ran`, the 20-bit random-access grant
  `RarGrant` (`unpack`, `to_bits`), `rar_grant_to_ul_dci` and `is_crnti`.
- `falconsniff.pdsch` – `config_mimo_type`, `config_mimo_pmi`,
  `config_mimo_layers` and `config_mimo` (raising `MimoConfigError` with a
  `stage` of `"type"`, `"pmi"` or `"layers"`), `format1c_tbs`,
  `cqi_subband_size`, `cqi_no_subbands`, and the `TxScheme` and
  `Modulation` enums.
- `falconsniff.pusch` – `ul_prb_allocation` for the two slots of an uplink
  grant under each `HoppingMode`, and `ul_fill_mcs` / `ul_fill_mcs_256`,
  which pick modulation and TBS index (or, for index 26 of the 256QAM table
  and for retransmissions, the size itself) as an `UlMcs`.
- Support code:
  - `falconsniff.queue.ThreadSafeQueue` – blocking FIFO whose waiting
    consumers are released by `cancel()`.
  - `falconsniff.signals` – `SignalGate` forwards SIGINT to attached
    `SignalHandler` objects.
  - `falconsniff.stopwatch` – `TimeVal`, `Stopwatch`, `subtract` and
    `format_timeval`.
  - `falconsniff.lifetime` – `Lifetime` reports how long it lived to a
    `LifetimeCollector`; `PrintLifetime` prints it through
    `GlobalLifetimePrinter`. Both work as context managers.
  - `falconsniff.broadcast` – UDP `BroadcastMaster` (send to an address,
    receive replies) and `BroadcastSlave` (bind a port, answer the last
    sender). Both are context managers.
  - `falconsniff.gps` – `GPSFix`, `DummyGPS` and `gps_fix_to_csv`.
  - `falconsniff.version` – `Version`, whose `git_version()` summarises
    revision, tag, modification flag and branch.

## Installation

```
pip install .
```

Running the tests:

```
pip install .[test]
pytest
```

## Examples

Search-space membership of a CCE index:

```python
from falconsniff.pdcch import ue_locations_check

ue_locations_check(nof_cce=21, nsubframe=3, rnti=0x4A2F, this_ncce=8)
```

Packing DCI bits into hex and back:

```python
from falconsniff.dci import sprint_hex, sscan_hex

text = sprint_hex([1, 0, 1, 1, 0, 0, 1], 7)   # "b2"
bits = sscan_hex(text, 7)                       # [1, 0, 1, 1, 0, 0, 1]
```

MIMO configuration for a Format 2A grant with two transport blocks:

```python
from falconsniff.dci import DciFormat
from falconsniff.pdsch import config_mimo

scheme, pmi, layers = config_mimo(nof_ports=2, fmt=DciFormat.FORMAT2A, nof_tb=2, pinfo=0)
# (TxScheme.CDD, 0, 2)
```

Uplink MCS from the 256QAM table:

```python
from falconsniff.pusch import ul_fill_mcs_256

mcs = ul_fill_mcs_256(mcs_idx=26, l_prb=10)
# UlMcs(mod=Modulation.QAM256, tbs_idx=None, tbs=9144, rv=None)
```

Timing a block of code:

```python
from falconsniff.lifetime import PrintLifetime

with PrintLifetime("decode took "):
    ...
```

## What the package does not do

It works on values you hand it. It does not receive radio samples,
demodulate, extract LLRs from a subframe, run the Viterbi decoder or CRC
check of a DCI, decode PDSCH or PUSCH payloads, parse RRC or MAC messages,
or write capture files. There is no command-line program; everything is
used as a library.