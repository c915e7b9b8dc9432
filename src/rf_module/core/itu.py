"""
ITU radio band designations.

Each band runs from one decade boundary up to 1 Hz below the next one,
so the table is contiguous from 3 Hz to just under 300 GHz.
"""

from .allocation import Allocation, Allocations, band_name
from .frequency_range import Range
from .hz import Hz

ITU_ELF = Hz(3)
ITU_SLF = Hz(3e1)
ITU_ULF = Hz(3e2)
ITU_VLF = Hz(3e3)
ITU_LF = Hz(3e4)
ITU_MF = Hz(3e5)
ITU_HF = Hz(3e6)
ITU_VHF = Hz(3e7)
ITU_UHF = Hz(3e8)
ITU_SHF = Hz(3e9)
ITU_EHF = Hz(3e10)
ITU_THF = Hz(3e11)

# Extremely Low Frequency, 3 Hz to 30 Hz
ELF_BAND = Allocation(name="ELF", range=Range(ITU_ELF, ITU_SLF - 1))

# Super Low Frequency, 30 Hz to 300 Hz
SLF_BAND = Allocation(name="SLF", range=Range(ITU_SLF, ITU_ULF - 1))

# Ultra Low Frequency, 300 Hz to 3 kHz
ULF_BAND = Allocation(name="ULF", range=Range(ITU_ULF, ITU_VLF - 1))

# Very Low Frequency, 3 kHz to 30 kHz
VLF_BAND = Allocation(name="VLF", range=Range(ITU_VLF, ITU_LF - 1))

# Low Frequency, 30 kHz to 300 kHz
LF_BAND = Allocation(name="LF", range=Range(ITU_LF, ITU_MF - 1))

# Medium Frequency, 300 kHz to 3 MHz
MF_BAND = Allocation(name="MF", range=Range(ITU_MF, ITU_HF - 1))

# High Frequency, 3 MHz to 30 MHz
HF_BAND = Allocation(name="HF", range=Range(ITU_HF, ITU_VHF - 1))

# Very High Frequency, 30 MHz to 300 MHz
VHF_BAND = Allocation(name="VHF", range=Range(ITU_VHF, ITU_UHF - 1))

# Ultra High Frequency, 300 MHz to 3 GHz
UHF_BAND = Allocation(name="UHF", range=Range(ITU_UHF, ITU_SHF - 1))

# Super High Frequency, 3 GHz to 30 GHz
SHF_BAND = Allocation(name="SHF", range=Range(ITU_SHF, ITU_EHF - 1))

# Extremely High Frequency, 30 GHz to 300 GHz
EHF_BAND = Allocation(name="EHF", range=Range(ITU_EHF, ITU_THF - 1))

# All ITU allocated bands, lowest first. Mostly useful to amateur radio
# applications, where the ITU names are in everyday use.
ITU_BANDS = Allocations([
    ELF_BAND, SLF_BAND, ULF_BAND, VLF_BAND,
    LF_BAND, MF_BAND, HF_BAND,
    VHF_BAND, UHF_BAND, SHF_BAND, EHF_BAND,
])


def itu_band_name(freq: float) -> str:
    """Name of the ITU band the frequency is in, or "" outside 3 Hz - 300 GHz."""
    return band_name(ITU_BANDS, freq)
