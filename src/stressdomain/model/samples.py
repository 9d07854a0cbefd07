"""
Stress Domain Data
==================
Data structures for the heatmap grid and the annotated points drawn on top
of it.

Classes:
    Sample: One grid value at (R, theta).
    AnnotatedPoint: A caller-supplied marker.
    StressGrid: The ordered sample sequence plus its grid dimensions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, TYPE_CHECKING

import numpy as np

from stressdomain.config import (
    DEFAULT_R_DIVISIONS,
    DEFAULT_THETA_DIVISIONS,
    R_MAX,
    THETA_MAX,
)

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Sample:
    r: float
    theta: float
    value: float


@dataclass(frozen=True)
class AnnotatedPoint:
    r: float
    theta: float


@dataclass
class StressGrid:
    """
    Grid of samples over R in [0, 3] and theta in [0, 180].

    `samples` holds one entry per cell. The dimensions are divisions, so a
    consistent grid has (r_divisions + 1) * (theta_divisions + 1) samples.
    Consistency is not enforced; a mismatch just draws misaligned cells.
    """
    samples: list[Sample] = field(default_factory=list)
    r_divisions: int = DEFAULT_R_DIVISIONS
    theta_divisions: int = DEFAULT_THETA_DIVISIONS

    @classmethod
    def random(
        cls,
        r_divisions: int = DEFAULT_R_DIVISIONS,
        theta_divisions: int = DEFAULT_THETA_DIVISIONS,
        rng: Optional[np.random.Generator] = None,
    ) -> StressGrid:
        """
        Uniformly random values on an evenly spaced grid, both endpoints
        included. Samples are ordered R-major (all theta for the first R,
        then the next R).
        """
        rng = rng if rng is not None else np.random.default_rng()
        rs = np.linspace(0.0, R_MAX, r_divisions + 1)
        thetas = np.linspace(0.0, THETA_MAX, theta_divisions + 1)
        values = rng.random((len(rs), len(thetas)))

        samples = [
            Sample(r=float(r), theta=float(theta), value=float(values[i, j]))
            for i, r in enumerate(rs)
            for j, theta in enumerate(thetas)
        ]
        return cls(samples=samples, r_divisions=r_divisions, theta_divisions=theta_divisions)

    @classmethod
    def from_samples(
        cls,
        data: Iterable[Sample | tuple[float, float, float]],
        r_divisions: int,
        theta_divisions: int,
    ) -> StressGrid:
        """Build a grid from Sample objects or (R, theta, value) triples."""
        samples = [d if isinstance(d, Sample) else Sample(*d) for d in data]
        return cls(samples=samples, r_divisions=int(r_divisions), theta_divisions=int(theta_divisions))

    @property
    def expected_size(self) -> int:
        return (self.r_divisions + 1) * (self.theta_divisions + 1)

    def __len__(self) -> int:
        return len(self.samples)

    def as_arrays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Return (r, theta, value) as three 1-D arrays in sample order."""
        if not self.samples:
            empty = np.empty(0, dtype=np.float64)
            return empty, empty.copy(), empty.copy()
        table = np.array([(s.r, s.theta, s.value) for s in self.samples], dtype=np.float64)
        return table[:, 0], table[:, 1], table[:, 2]
