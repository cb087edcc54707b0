import pytest

from falconsniff.dci import DciFormat
from falconsniff.pdsch import (
    MimoConfigError,
    TxScheme,
    config_mimo,
    config_mimo_layers,
    config_mimo_pmi,
    config_mimo_type,
    cqi_no_subbands,
    cqi_subband_size,
    format1c_tbs,
)


def test_format1c_table_ends():
    assert format1c_tbs(0) == 40
    assert format1c_tbs(31) == 1736


def test_format1c_table_increasing():
    values = [format1c_tbs(i) for i in range(32)]
    assert values == sorted(values)


@pytest.mark.parametrize("idx", [-1, 32])
def test_format1c_invalid(idx):
    with pytest.raises(ValueError):
        format1c_tbs(idx)


@pytest.mark.parametrize(
    "nof_prb,size", [(7, 4), (26, 4), (27, 6), (63, 6), (64, 8), (110, 8)]
)
def test_subband_size_boundaries(nof_prb, size):
    assert cqi_subband_size(nof_prb) == size


@pytest.mark.parametrize("nof_prb", [0, 6, 111])
def test_subband_size_invalid(nof_prb):
    with pytest.raises(ValueError):
        cqi_subband_size(nof_prb)


@pytest.mark.parametrize("nof_prb", [7, 15, 25, 50, 75, 100, 110])
def test_no_subbands_covers_bandwidth(nof_prb):
    size = cqi_subband_size(nof_prb)
    n = cqi_no_subbands(nof_prb)
    assert (n - 1) * size < nof_prb <= n * size


def test_no_subbands_invalid_is_zero():
    assert cqi_no_subbands(6) == 0
    assert cqi_no_subbands(111) == 0


def test_single_port_format1():
    assert config_mimo(1, DciFormat.FORMAT1, 1, 0) == (TxScheme.PORT0, 0, 1)


def test_diversity_layers_equal_ports():
    scheme, pmi, layers = config_mimo(2, DciFormat.FORMAT1A, 1, 0)
    assert scheme == TxScheme.DIVERSITY
    assert layers == 2


def test_format2_single_tb_no_pinfo_is_diversity():
    assert config_mimo_type(2, DciFormat.FORMAT2, 1, 0) == TxScheme.DIVERSITY


def test_format2_two_blocks_spatial_mux():
    scheme, pmi, layers = config_mimo(2, DciFormat.FORMAT2, 2, 1)
    assert scheme == TxScheme.SPATIALMUX
    assert pmi == 1
    assert layers == 2


def test_spatial_mux_single_tb_pmi():
    assert config_mimo_pmi(TxScheme.SPATIALMUX, 1, 1) == 0
    assert config_mimo_layers(TxScheme.SPATIALMUX, 1, 2) == 1


def test_format2a_two_blocks_cdd():
    assert config_mimo(2, DciFormat.FORMAT2A, 2, 0) == (TxScheme.CDD, 0, 2)


def test_cdd_with_one_block_fails_at_layers():
    with pytest.raises(MimoConfigError) as info:
        config_mimo(2, DciFormat.FORMAT2A, 1, 1)
    assert info.value.stage == "layers"


@pytest.mark.parametrize("fmt", [DciFormat.FORMAT0, DciFormat.FORMAT1B, DciFormat.FORMAT1D, DciFormat.FORMAT2B])
def test_unsupported_formats(fmt):
    with pytest.raises(MimoConfigError) as info:
        config_mimo(2, fmt, 1, 0)
    assert info.value.stage == "type"


@pytest.mark.parametrize("nof_tb,pinfo", [(2, 2), (2, 3), (1, 5), (1, 0)])
def test_invalid_pmi(nof_tb, pinfo):
    with pytest.raises(MimoConfigError) as info:
        config_mimo_pmi(TxScheme.SPATIALMUX, nof_tb, pinfo)
    assert info.value.stage == "pmi"


def test_pmi_ignored_outside_spatial_mux():
    assert config_mimo_pmi(TxScheme.CDD, 2, 3) == 0


@pytest.mark.parametrize("scheme,nof_tb", [(TxScheme.PORT0, 2), (TxScheme.DIVERSITY, 2), (TxScheme.SPATIALMUX, 3)])
def test_invalid_layers(scheme, nof_tb):
    with pytest.raises(MimoConfigError):
        config_mimo_layers(scheme, nof_tb, 2)