"""
Named frequency allocations and the SI band table.

An Allocation is a Range of frequency with a name, such as the "VHF" ITU
band or "WiFi Channel 11". Allocations groups them so a frequency can be
classified against a whole table at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .frequency_range import Range
from .hz import GHz, KHz, MHz, THz


@dataclass(frozen=True)
class Allocation:
    """
    A named slice of spectrum.

    Attributes:
        name: Name describing the band
        range: Range of frequency this allocation covers
    """

    name: str
    range: Range

    def __str__(self) -> str:
        return f"name={self.name}, range={self.range}"


class Allocations(tuple):
    """
    An ordered, immutable group of allocations.

    Order is kept exactly as given. Allocations may overlap, in which case
    several of them can contain the same frequency.
    """

    __slots__ = ()

    def __new__(cls, allocations: Iterable[Allocation] = ()) -> "Allocations":
        return super().__new__(cls, allocations)

    def __repr__(self) -> str:
        return f"Allocations({list(self)!r})"

    def containing_frequency(self, freq: float) -> "Allocations":
        """Get every allocation that contains this frequency, in table order."""
        return Allocations(a for a in self if a.range.contains_frequency(freq))

    def overlapping(self, other: Range) -> "Allocations":
        """Get every allocation that overlaps the given range, in table order."""
        return Allocations(a for a in self if a.range.overlaps(other))

    def first(self) -> Optional[Allocation]:
        """Get the first allocation, or None if there are none."""
        for allocation in self:
            return allocation
        return None

    def names(self) -> List[str]:
        """Names of all allocations, in table order."""
        return [a.name for a in self]

    def by_name(self, name: str) -> Optional[Allocation]:
        """Find the first allocation with the given name."""
        for allocation in self:
            if allocation.name == name:
                return allocation
        return None


def band_name(table: Allocations, freq: float) -> str:
    """Name of the first allocation in ``table`` containing ``freq``, or ""."""
    match = table.containing_frequency(freq).first()
    if match is None:
        return ""
    return match.name


# KHZ_BAND represents the Kilohertz band, from 1 kHz up to 1 MHz.
KHZ_BAND = Allocation(name="KHz", range=Range(KHz, MHz - 1))

# MHZ_BAND represents the Megahertz band, from 1 MHz up to 1 GHz.
MHZ_BAND = Allocation(name="MHz", range=Range(MHz, GHz - 1))

# GHZ_BAND represents the Gigahertz band, from 1 GHz up to 1 THz.
GHZ_BAND = Allocation(name="GHz", range=Range(GHz, THz - 1))

# SI_BANDS represents the Hz-based allocations (KHz, MHz, GHz)
SI_BANDS = Allocations([KHZ_BAND, MHZ_BAND, GHZ_BAND])


def si_band_name(freq: float) -> str:
    """Name of the SI band (KHz, MHz, GHz) the frequency is in, or ""."""
    return band_name(SI_BANDS, freq)
