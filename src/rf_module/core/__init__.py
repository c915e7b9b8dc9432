"""
Core module - Frequency values, ranges and band allocations.
"""

from .allocation import (
    GHZ_BAND,
    KHZ_BAND,
    MHZ_BAND,
    SI_BANDS,
    Allocation,
    Allocations,
    band_name,
    si_band_name,
)
from .config import BandPlanConfig, ConfigValidationError, get_preset, list_presets
from .errors import InvalidFrequencyError, RFError, UnknownUnitError
from .frequency_range import Range
from .hz import GHz, Hz, KHz, MHz, THz, format_hz, must_parse_hz, parse_hz
from .itu import (
    EHF_BAND,
    ELF_BAND,
    HF_BAND,
    ITU_BANDS,
    LF_BAND,
    MF_BAND,
    SHF_BAND,
    SLF_BAND,
    UHF_BAND,
    ULF_BAND,
    VHF_BAND,
    VLF_BAND,
    itu_band_name,
)

__all__ = [
    # Frequency values
    "Hz",
    "KHz",
    "MHz",
    "GHz",
    "THz",
    "parse_hz",
    "must_parse_hz",
    "format_hz",
    # Errors
    "RFError",
    "InvalidFrequencyError",
    "UnknownUnitError",
    # Ranges and allocations
    "Range",
    "Allocation",
    "Allocations",
    "band_name",
    # SI bands
    "KHZ_BAND",
    "MHZ_BAND",
    "GHZ_BAND",
    "SI_BANDS",
    "si_band_name",
    # ITU bands
    "ELF_BAND",
    "SLF_BAND",
    "ULF_BAND",
    "VLF_BAND",
    "LF_BAND",
    "MF_BAND",
    "HF_BAND",
    "VHF_BAND",
    "UHF_BAND",
    "SHF_BAND",
    "EHF_BAND",
    "ITU_BANDS",
    "itu_band_name",
    # Band plan configuration
    "BandPlanConfig",
    "ConfigValidationError",
    "get_preset",
    "list_presets",
]
