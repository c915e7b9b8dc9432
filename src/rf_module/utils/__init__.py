"""
Utility functions and helpers.
"""

from .conversions import SPEED_OF_LIGHT, frequency_to_wavelength, wavelength_to_frequency

__all__ = [
    "SPEED_OF_LIGHT",
    "frequency_to_wavelength",
    "wavelength_to_frequency",
]
