"""
Unit conversion utilities for frequency values.
"""

import numpy as np
from typing import Union

# Type alias for numeric types
Numeric = Union[float, int, np.ndarray]

# Speed of light in vacuum, m/s
SPEED_OF_LIGHT = 299792458.0


def frequency_to_wavelength(freq_hz: Numeric) -> Numeric:
    """
    Convert frequency to free-space wavelength.

    Args:
        freq_hz: Frequency in Hz

    Returns:
        Wavelength in meters
    """
    return SPEED_OF_LIGHT / np.asarray(freq_hz, dtype=np.float64)[()]


def wavelength_to_frequency(wavelength_m: Numeric) -> Numeric:
    """
    Convert free-space wavelength to frequency.

    Args:
        wavelength_m: Wavelength in meters

    Returns:
        Frequency in Hz
    """
    return SPEED_OF_LIGHT / np.asarray(wavelength_m, dtype=np.float64)[()]

