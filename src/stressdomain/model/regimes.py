"""Fault regime bands along the radial coordinate R."""
from __future__ import annotations

from enum import StrEnum

from stressdomain.config import R_MAX


class RegimeOutOfRangeError(ValueError):
    """R does not fall inside any fault regime band."""


class FaultRegime(StrEnum):
    """Display labels double as values."""
    NORMAL = "Normal"
    STRIKE_SLIP = "Strike slip"
    REVERSE = "Reverse"

    @property
    def midpoint(self) -> float:
        """R at the middle of the band, where the regime label is drawn."""
        return _BANDS[self][0] + 0.5


# Half-open bands, except Reverse which also includes R_MAX
_BANDS: dict[FaultRegime, tuple[float, float]] = {
    FaultRegime.NORMAL: (0.0, 1.0),
    FaultRegime.STRIKE_SLIP: (1.0, 2.0),
    FaultRegime.REVERSE: (2.0, R_MAX),
}


def classify_regime(r: float) -> FaultRegime:
    """
    Return the fault regime R falls into.

    Raises:
        RegimeOutOfRangeError: If R is outside [0, 3].
    """
    if 0.0 <= r < 1.0:
        return FaultRegime.NORMAL
    if 1.0 <= r < 2.0:
        return FaultRegime.STRIKE_SLIP
    if 2.0 <= r <= R_MAX:
        return FaultRegime.REVERSE
    raise RegimeOutOfRangeError(f"R value out of range (0-{R_MAX:g}): {r}")


def phi_prime(r: float) -> float:
    """
    Regime-normalised position of R inside its band.

    Normal: R, Strike-slip: 2 - R, Reverse: R - 2.
    """
    match classify_regime(r):
        case FaultRegime.NORMAL:
            return r
        case FaultRegime.STRIKE_SLIP:
            return 2.0 - r
        case FaultRegime.REVERSE:
            return r - 2.0
