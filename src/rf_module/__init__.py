"""
RF Module - Radio frequency values and band allocations

Parses and formats frequencies written as human strings ("144.39MHz"),
does exact arithmetic over frequency ranges, and classifies frequencies
against fixed band tables.

Band Tables:
    - SI bands: KHz, MHz, GHz
    - ITU bands: ELF (3 Hz) through EHF (300 GHz)

Frequencies serialize to JSON and YAML as string tokens, see
rf_module.core.serialization.
"""

__version__ = "0.1.0"
__author__ = "RF Module Team"

from .core.allocation import SI_BANDS, Allocation, Allocations
from .core.errors import InvalidFrequencyError, RFError, UnknownUnitError
from .core.frequency_range import Range
from .core.hz import GHz, Hz, KHz, MHz, THz, format_hz, must_parse_hz, parse_hz
from .core.itu import ITU_BANDS

__all__ = [
    # Core
    "Hz",
    "KHz",
    "MHz",
    "GHz",
    "THz",
    "parse_hz",
    "must_parse_hz",
    "format_hz",
    "Range",
    "Allocation",
    "Allocations",
    "SI_BANDS",
    "ITU_BANDS",
    # Errors
    "RFError",
    "InvalidFrequencyError",
    "UnknownUnitError",
    # Version
    "__version__",
]
