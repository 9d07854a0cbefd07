"""
Color Schemes
=============
Named palettes and the gradient lookup used to color the stress domain grid.

A palette is a short ordered list of hex stops. Values in [0, 1] are mapped
onto it by linear interpolation between neighbouring stops, so a sparse
palette still produces a smooth gradient.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from types import MappingProxyType
from typing import Mapping, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    import numpy.typing as npt


class UnknownColorSchemeError(KeyError):
    """Raised when a palette name is not present in the scheme registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.available = available

    def __str__(self) -> str:
        return f"Unknown color scheme '{self.name}' (available: {', '.join(self.available)})"


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Parse '#rrggbb' (or 'rrggbb') into an (r, g, b) tuple of ints."""
    digits = color.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected a 6-digit hex color, got '{color}'")
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError as e:
        raise ValueError(f"Invalid hex color '{color}'") from e


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode channels (0-255) as a lowercase '#rrggbb' string."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


@dataclass(frozen=True)
class ColorScheme:
    """
    An immutable named palette.

    Attributes:
        name: Registry key, e.g. "viridis".
        stops: Ordered hex color stops, first maps to 0.0, last to 1.0.
    """
    name: str
    stops: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.stops) < 2:
            raise ValueError(f"Color scheme '{self.name}' needs at least two stops")
        # Fail early on malformed stops rather than at the first lookup
        for stop in self.stops:
            hex_to_rgb(stop)

    @property
    def rgb_stops(self) -> npt.NDArray[np.float64]:
        """Stops as an (n, 3) float array of 0-255 channels."""
        return np.array([hex_to_rgb(s) for s in self.stops], dtype=np.float64)

    def interpolate_rgb(self, values: npt.ArrayLike) -> npt.NDArray[np.uint8]:
        """
        Vectorised color lookup.

        Args:
            values: Scalar or array of values, nominally in [0, 1]. NaN maps
                to the first stop.

        Returns:
            uint8 array of shape values.shape + (3,).
        """
        stops = self.rgb_stops
        n = len(stops)

        # NaN and below-range values sit on the first stop, above-range on the last
        clean = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0, posinf=1.0, neginf=0.0)
        scaled = np.clip(clean, 0.0, 1.0) * (n - 1)
        index = np.floor(scaled).astype(np.int64)
        factor = scaled - index

        at_top = index >= n - 1
        lower = np.minimum(index, n - 2)
        factor = np.where(at_top, 1.0, factor)

        start = stops[lower]
        end = stops[lower + 1]
        mixed = start + (end - start) * factor[..., np.newaxis]
        # Round half up, matching the scalar lookup
        return np.floor(mixed + 0.5).astype(np.uint8)

    def get_color(self, value: float) -> str:
        """
        Map a single value onto the palette.

        Returns the last stop unchanged when value * (n - 1) reaches the top
        stop; otherwise interpolates each channel between the two
        neighbouring stops and rounds to the nearest integer.
        """
        n = len(self.stops)
        value = float(value)
        if math.isnan(value):
            value = 0.0
        scaled = min(max(value, 0.0), 1.0) * (n - 1)
        index = int(np.floor(scaled))
        factor = scaled - index

        if index >= n - 1:
            return self.stops[-1]

        r1, g1, b1 = hex_to_rgb(self.stops[index])
        r2, g2, b2 = hex_to_rgb(self.stops[index + 1])
        r = int(np.floor(r1 + factor * (r2 - r1) + 0.5))
        g = int(np.floor(g1 + factor * (g2 - g1) + 0.5))
        b = int(np.floor(b1 + factor * (b2 - b1) + 0.5))
        return rgb_to_hex(r, g, b)

    def plot(self, samples: int = 256) -> None:
        """
        Plot the palette as a gradient strip.
        """
        gradient = self.interpolate_rgb(np.linspace(0.0, 1.0, samples))

        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 1.5))
        ax = fig.add_subplot(111)

        ax.imshow(gradient[np.newaxis, :, :], aspect="auto", extent=(0.0, 1.0, 0.0, 1.0))
        ax.set_yticks([])
        ax.set_xticks(np.linspace(0.0, 1.0, len(self.stops)))
        ax.set_title(f"{self.name} ({len(self.stops)} stops)")
        ax.set_xlabel("Value")

        plt.show()


# ------------------------------------------------------------------------------
# Built-in palettes
# ------------------------------------------------------------------------------
VIRIDIS = ColorScheme(
    name="viridis",
    stops=(
        "#440154", "#482878", "#3e4989", "#31688e", "#26828e",
        "#1f9e89", "#35b779", "#6ece58", "#b5de2b", "#fde725",
    ),
)

PLASMA = ColorScheme(
    name="plasma",
    stops=(
        "#0d0887", "#46039f", "#7201a8", "#9c179e", "#bd3786",
        "#d8576b", "#ed7953", "#fb9f3a", "#fdca26", "#f0f921",
    ),
)

INFERNO = ColorScheme(
    name="inferno",
    stops=(
        "#000004", "#1b0c41", "#4a0c6b", "#781c6d", "#a52c60",
        "#cf4446", "#ed6925", "#fb9b06", "#f7d13d", "#fcffa4",
    ),
)

BLACK_WHITE = ColorScheme(name="bw", stops=("#000000", "#ffffff"))

COLOR_SCHEMES: Mapping[str, ColorScheme] = MappingProxyType({
    scheme.name: scheme for scheme in (VIRIDIS, PLASMA, INFERNO, BLACK_WHITE)
})


def get_scheme(name: str, schemes: Mapping[str, ColorScheme] = COLOR_SCHEMES) -> ColorScheme:
    """Look up a palette by name, raising UnknownColorSchemeError if absent."""
    try:
        return schemes[name]
    except KeyError:
        raise UnknownColorSchemeError(name, sorted(schemes)) from None


def get_color(value: float, name: str, schemes: Mapping[str, ColorScheme] = COLOR_SCHEMES) -> str:
    """Resolve value to a '#rrggbb' color on the named palette."""
    return get_scheme(name, schemes).get_color(value)
