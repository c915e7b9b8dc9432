"""
Tests for allocations and the SI and ITU band tables.
"""

import pytest

from rf_module.core.allocation import (
    GHZ_BAND,
    KHZ_BAND,
    MHZ_BAND,
    SI_BANDS,
    Allocation,
    Allocations,
    band_name,
    si_band_name,
)
from rf_module.core.frequency_range import Range
from rf_module.core.hz import GHz, Hz, KHz, MHz, THz, must_parse_hz
from rf_module.core.itu import (
    EHF_BAND,
    ELF_BAND,
    HF_BAND,
    ITU_BANDS,
    ITU_THF,
    UHF_BAND,
    VHF_BAND,
    itu_band_name,
)


@pytest.fixture
def overlapping_table():
    """A table whose entries overlap."""
    return Allocations([
        Allocation(name="2m", range=Range(144 * MHz, 148 * MHz)),
        Allocation(name="APRS", range=Range(Hz(144_390_000), Hz(144_390_000))),
        Allocation(name="70cm", range=Range(420 * MHz, 450 * MHz)),
    ])


class TestAllocation:
    """Test single allocations."""

    def test_str(self):
        """Allocations print their name and range."""
        allocation = Allocation(name="test", range=Range(KHz, MHz))
        assert str(allocation) == "name=test, range=1000Hz->1000kHz"

    def test_equality(self):
        """Allocations compare by value."""
        a = Allocation(name="x", range=Range(1, 2))
        b = Allocation(name="x", range=Range(1, 2))
        assert a == b


class TestAllocations:
    """Test allocation table queries."""

    def test_containing_frequency_one(self):
        """144.39MHz is in exactly one ITU band, VHF."""
        frequency = must_parse_hz("144.39MHz")
        assert VHF_BAND.range.contains_frequency(frequency)
        vhf = ITU_BANDS.containing_frequency(frequency)
        assert len(vhf) == 1
        assert vhf[0].name == "VHF"

    def test_containing_frequency_many(self, overlapping_table):
        """Overlapping entries all match, in table order."""
        matches = overlapping_table.containing_frequency(must_parse_hz("144.39MHz"))
        assert matches.names() == ["2m", "APRS"]
        assert isinstance(matches, Allocations)

    def test_containing_frequency_none(self, overlapping_table):
        """No match gives an empty table, not an error."""
        matches = overlapping_table.containing_frequency(Hz(0))
        assert len(matches) == 0
        assert matches.first() is None

    def test_first(self, overlapping_table):
        """first() gives the first entry."""
        assert overlapping_table.first().name == "2m"
        assert Allocations().first() is None

    def test_overlapping(self, overlapping_table):
        """Entries overlapping a range are returned in table order."""
        matches = overlapping_table.overlapping(Range(147 * MHz, 430 * MHz))
        assert matches.names() == ["2m", "70cm"]

    def test_by_name(self, overlapping_table):
        """Entries can be looked up by name."""
        assert overlapping_table.by_name("70cm").range.low == 420 * MHz
        assert overlapping_table.by_name("6m") is None

    def test_is_immutable_sequence(self, overlapping_table):
        """Tables are tuples."""
        assert isinstance(overlapping_table, tuple)
        with pytest.raises(TypeError):
            overlapping_table[0] = KHZ_BAND

    def test_band_name(self, overlapping_table):
        """band_name gives the first match or an empty string."""
        assert band_name(overlapping_table, 144.39 * MHz) == "2m"
        assert band_name(overlapping_table, Hz(0)) == ""


class TestSIBands:
    """Test the SI magnitude bands."""

    def test_table(self):
        """The SI table holds KHz, MHz and GHz in order."""
        assert SI_BANDS.names() == ["KHz", "MHz", "GHz"]
        assert list(SI_BANDS) == [KHZ_BAND, MHZ_BAND, GHZ_BAND]

    def test_edges(self):
        """Each band ends 1 Hz below the next starts."""
        assert KHZ_BAND.range == Range(KHz, MHz - 1)
        assert MHZ_BAND.range == Range(MHz, GHz - 1)
        assert GHZ_BAND.range == Range(GHz, THz - 1)

    def test_si_band_name(self):
        """Frequencies are named by their magnitude."""
        assert si_band_name(must_parse_hz("144.39MHz")) == "MHz"
        assert si_band_name(KHz) == "KHz"
        assert si_band_name(MHz - 1) == "KHz"
        assert si_band_name(MHz) == "MHz"
        assert si_band_name(2.4 * GHz) == "GHz"

    def test_si_band_name_outside(self):
        """Below 1 kHz and from 1 THz up there is no SI band."""
        assert si_band_name(Hz(999)) == ""
        assert si_band_name(THz) == ""
        assert si_band_name(-MHz) == ""


class TestITUBands:
    """Test the ITU band table."""

    def test_table(self):
        """Eleven bands, ELF through EHF."""
        assert ITU_BANDS.names() == [
            "ELF", "SLF", "ULF", "VLF", "LF", "MF",
            "HF", "VHF", "UHF", "SHF", "EHF",
        ]

    def test_boundaries(self):
        """Bands start on the decade boundaries from 3 Hz."""
        lows = [allocation.range.low for allocation in ITU_BANDS]
        assert lows == [3, 3e1, 3e2, 3e3, 3e4, 3e5, 3e6, 3e7, 3e8, 3e9, 3e10]
        assert ELF_BAND.range.low == 3
        assert EHF_BAND.range.high == ITU_THF - 1
        assert ITU_THF == 3e11

    def test_contiguous(self):
        """Each band ends 1 Hz below the next starts."""
        for lower, upper in zip(ITU_BANDS, ITU_BANDS[1:]):
            assert lower.range.high + 1 == upper.range.low

    def test_partitioned(self):
        """Every band edge is in exactly one band."""
        for allocation in ITU_BANDS:
            for edge in allocation.range:
                matches = ITU_BANDS.containing_frequency(edge)
                assert matches.names() == [allocation.name]

    def test_itu_band_name(self):
        """Frequencies are named by their ITU band."""
        assert itu_band_name(must_parse_hz("144.39MHz")) == "VHF"
        assert itu_band_name(must_parse_hz("14.074MHz")) == "HF"
        assert itu_band_name(must_parse_hz("446MHz")) == "UHF"
        assert itu_band_name(Hz(3)) == "ELF"

    def test_itu_band_edges(self):
        """Band edges fall on the expected side."""
        assert itu_band_name(Hz(3e7) - 1) == HF_BAND.name
        assert itu_band_name(Hz(3e7)) == VHF_BAND.name
        assert itu_band_name(Hz(3e8)) == UHF_BAND.name

    def test_itu_band_name_outside(self):
        """Below 3 Hz and from 300 GHz up there is no ITU band."""
        assert itu_band_name(Hz(2)) == ""
        assert itu_band_name(ITU_THF) == ""
