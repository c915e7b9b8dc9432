"""
Frequency values in Hz.

A frequency is a signed number of cycles per second. It is parsed from,
and formatted to, a short human string made of a decimal value and a unit:

    >>> parse_hz("144.39MHz")
    Hz(144390000.0)
    >>> str(parse_hz("1440.39MHz"))
    '1.44039GHz'

Valid units are Hz, kHz, MHz, GHz and THz, in any letter case. Parsed values
are truncated toward zero to a whole number of Hz.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Dict

from .errors import InvalidFrequencyError, RFError, UnknownUnitError

logger = logging.getLogger(__name__)

# Unit names used when formatting, indexed by the number of 1000x steps
UNIT_NAMES = ("Hz", "kHz", "MHz", "GHz", "THz")

# Unsigned decimal value followed by a run of letters. Searched, not
# anchored; when the group repeats, the last repetition wins.
_FREQUENCY_PATTERN = re.compile(
    r"(?P<sign>[-+])?((?P<freq>[0-9]*(\.[0-9]*)?)(?P<unit>[A-Za-z]+))+"
)


class Hz(float):
    """
    A frequency, in cycles per second.

    Hz behaves like a float: it compares, hashes and sorts as its value.
    ``+``, ``-``, ``*``, unary ``-``, ``abs()`` and ``/`` by a plain number
    return a new Hz, so offsets such as ``-KHz * 3`` stay frequencies.
    ``Hz / Hz`` is a ratio and returns float, as do ``//``, ``%`` and
    ``**``. ``str()`` gives the shortest unit-scaled form that ``parse_hz``
    reads back.
    """

    __slots__ = ()

    def __new__(cls, value: Any = 0.0) -> "Hz":
        return super().__new__(cls, value)

    @classmethod
    def from_string(cls, freq: str) -> "Hz":
        """Parse a frequency string such as "144.39MHz"."""
        return parse_hz(freq)

    @classmethod
    def from_json(cls, token: str) -> "Hz":
        """Read a frequency from its JSON/YAML string token."""
        if not isinstance(token, str):
            raise InvalidFrequencyError(repr(token), "expected a string token")
        return parse_hz(token)

    def to_json(self) -> str:
        """Frequencies travel as strings, never as raw numbers."""
        return format_hz(self)

    def __repr__(self) -> str:
        return f"Hz({float(self)!r})"

    def __str__(self) -> str:
        return format_hz(self)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return format_hz(self)
        return float.__format__(self, format_spec)

    # Arithmetic keeps the Hz type

    def __add__(self, other: Any) -> "Hz":
        return _wrap(float.__add__(self, other))

    def __radd__(self, other: Any) -> "Hz":
        return _wrap(float.__radd__(self, other))

    def __sub__(self, other: Any) -> "Hz":
        return _wrap(float.__sub__(self, other))

    def __rsub__(self, other: Any) -> "Hz":
        return _wrap(float.__rsub__(self, other))

    def __mul__(self, other: Any) -> "Hz":
        return _wrap(float.__mul__(self, other))

    def __rmul__(self, other: Any) -> "Hz":
        return _wrap(float.__rmul__(self, other))

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, Hz):
            return float.__truediv__(self, other)
        return _wrap(float.__truediv__(self, other))

    def __neg__(self) -> "Hz":
        return Hz(-float(self))

    def __pos__(self) -> "Hz":
        return self

    def __abs__(self) -> "Hz":
        return Hz(abs(float(self)))

    def wavelength(self) -> float:
        """Free-space wavelength in meters."""
        from ..utils.conversions import frequency_to_wavelength

        return float(frequency_to_wavelength(float(self)))

    def si_band_name(self) -> str:
        """Name of the SI band (KHz, MHz, GHz) holding this frequency, or ""."""
        from .allocation import si_band_name

        return si_band_name(self)

    def itu_band_name(self) -> str:
        """Name of the ITU band (ELF ... EHF) holding this frequency, or ""."""
        from .itu import itu_band_name

        return itu_band_name(self)


def _wrap(result: Any) -> Any:
    if result is NotImplemented:
        return NotImplemented
    return Hz(result)


# KHz represents one kilohertz, or 1,000 Hz
KHz = Hz(1e3)

# MHz represents one megahertz, or 1,000,000 Hz
MHz = Hz(1e6)

# GHz represents one gigahertz, or 1,000,000,000 Hz
GHz = Hz(1e9)

# THz represents one terahertz, or 1,000,000,000,000 Hz
THz = Hz(1e12)

# Power of ten applied by each unit
_UNIT_EXPONENTS: Dict[str, int] = {
    "hz": 0,
    "khz": 3,
    "mhz": 6,
    "ghz": 9,
    "thz": 12,
}


def format_hz(value: float) -> str:
    """
    Format a frequency with the largest SI unit that keeps it above 1.

    The value is divided by 1000 while it exceeds 1000, up to THz. Values
    beyond 1000 THz stay THz-scaled.

    Args:
        value: Frequency in Hz

    Returns:
        Formatted string (e.g., "144.39MHz", "-1.44039GHz", "10kHz")
    """
    # Start from the shortest decimal that reads back as the same float;
    # shifting the decimal point is then exact.
    frequency = Decimal(repr(float(value)))
    if not frequency.is_finite():
        return f"{float(value)}Hz"
    if frequency.is_zero():
        return "0Hz"

    sign = ""
    if frequency < 0:
        frequency = -frequency
        sign = "-"

    steps = 0
    while frequency > 1000 and steps < len(UNIT_NAMES) - 1:
        frequency = frequency.scaleb(-3)
        steps += 1

    mantissa = format(frequency.normalize(), "f")
    return f"{sign}{mantissa}{UNIT_NAMES[steps]}"


def parse_hz(freq: str) -> Hz:
    """
    Parse a frequency string into Hz.

    Examples of valid frequencies: "-10MHz", "2GHz", "2000Hz", "144.39mhz".

    Args:
        freq: Frequency string

    Returns:
        Frequency, truncated toward zero to whole Hz

    Raises:
        InvalidFrequencyError: Input has no value/unit shape, or no number
        UnknownUnitError: Unit is not Hz, kHz, MHz, GHz or THz
    """
    match = _FREQUENCY_PATTERN.search(freq)
    if match is None:
        logger.debug(f"Rejected frequency {freq!r}: no value/unit found")
        raise InvalidFrequencyError(freq)

    sign = match.group("sign")
    mantissa = match.group("freq")
    unit = match.group("unit")

    exponent = _UNIT_EXPONENTS.get(unit.lower())
    if exponent is None:
        logger.debug(f"Rejected frequency {freq!r}: unknown unit {unit!r}")
        raise UnknownUnitError(unit)

    try:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(mantissa) + exponent)
            value = Decimal(mantissa).scaleb(exponent)
    except (InvalidOperation, ValueError) as e:
        logger.debug(f"Rejected frequency {freq!r}: no numeric value")
        raise InvalidFrequencyError(freq, "no numeric value") from e

    if sign == "-":
        value = -value

    try:
        return Hz(int(value))
    except OverflowError as e:
        raise InvalidFrequencyError(freq, "value out of range") from e


def must_parse_hz(freq: str) -> Hz:
    """
    Parse a frequency that is known to be valid, such as a hardcoded literal.

    A bad literal is a programming error, not a user error: it is logged as
    critical and raised as RuntimeError, which aborts module import when
    used for constants. Never use this for untrusted input.
    """
    try:
        return parse_hz(freq)
    except RFError as e:
        logger.critical(f"Invalid frequency literal {freq!r}: {e}")
        raise RuntimeError(f"invalid frequency literal: {freq!r}") from e

