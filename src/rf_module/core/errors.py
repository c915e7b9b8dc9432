"""
Error types raised by the frequency value model.
"""


class RFError(ValueError):
    """Base class for frequency parsing errors."""

    pass


class InvalidFrequencyError(RFError):
    """Raised when a string does not look like a frequency at all."""

    def __init__(self, value: str, reason: str = ""):
        self.value = value
        message = f"rf: invalid frequency: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownUnitError(RFError):
    """Raised when a frequency carries a unit other than Hz/kHz/MHz/GHz/THz."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"rf: unknown unit: {unit}")
