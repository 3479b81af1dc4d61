from __future__ import annotations
from typing import Iterator, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor8
from ..conversions import np_hsl_to_rgb8
from ..exceptions import InvalidGradientInput
from ..types.color_types import ColorStop
from .hue import hue_lerp
from .stops import prepare_stops


class Gradient:
    """
    An immutable sequence of HSL colors, one per character cell.

    Build one with :meth:`from_stops` (or :func:`create_gradient`); the
    raw initializer takes an ``(N, 3)`` array of ``(h, s, l)`` rows.
    """
    __slots__ = ('_values',)

    def __init__(self, values: NDArray | Sequence[Tuple[float, float, float]]) -> None:
        arr = np.array(values, dtype=float)
        if arr.ndim != 2 or arr.shape[-1] != 3:
            raise ValueError(f"Gradient expects an (N, 3) array of HSL values, got shape {arr.shape}")
        if arr.shape[0] < 1:
            raise InvalidGradientInput("Gradient needs at least one color")
        arr.setflags(write=False)
        self._values = arr

    @classmethod
    def from_stops(cls, length: int, stops: Sequence[ColorStop]) -> Gradient:
        """
        Create a gradient of ``length`` colors from ``(position, color)`` stops.

        Args:
            length: Number of colors to produce, one per character.
            stops: Positions in [0, 1] with an ``HSLColor`` or ``RGBColor8``.
                   Before the first stop the color is solid, likewise after
                   the last one. With more than two stops the gradient passes
                   through each of them.

        Raises:
            InvalidGradientInput: ``length`` is not positive or ``stops`` is empty.
        """
        if length <= 0:
            raise InvalidGradientInput(f"Gradient length must be positive, got {length}")
        if not stops:
            raise InvalidGradientInput("Gradient needs at least one stop")

        stop_positions, stop_values = prepare_stops(stops)

        if length > 1:
            positions = np.arange(length, dtype=float) / (length - 1)
        else:
            positions = np.zeros(1)

        return cls(interpolate_stops(positions, stop_positions, stop_values))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def values(self) -> NDArray:
        """The read-only ``(N, 3)`` HSL array."""
        return self._values

    @property
    def points(self) -> Tuple[HSLColor, ...]:
        return tuple(HSLColor(*row) for row in self._values)

    @property
    def rgb_values(self) -> NDArray:
        """``(N, 3)`` integer array of 8-bit RGB channels."""
        return np_hsl_to_rgb8(self._values)

    @property
    def rgb_points(self) -> Tuple[RGBColor8, ...]:
        return tuple(RGBColor8(*row) for row in self.rgb_values.tolist())

    def __len__(self) -> int:
        return self._values.shape[0]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.points[index]
        return HSLColor(*self._values[index])

    def __iter__(self) -> Iterator[HSLColor]:
        return iter(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Gradient(length={len(self)})"


def interpolate_stops(positions: NDArray, stop_positions: NDArray, stop_values: NDArray) -> NDArray:
    """
    Sample sorted stops at each position.

    Positions at or before the first stop take its color unchanged, positions
    at or after the last stop take the last color. Anything in between is
    interpolated within the first bracketing pair ``left <= p <= right``:
    saturation and luminance linearly, hue along the shorter arc.
    """
    out = np.empty((positions.shape[0], 3), dtype=float)

    lead = positions <= stop_positions[0]
    trail = ~lead & (positions >= stop_positions[-1])
    inner = ~lead & ~trail

    out[lead] = stop_values[0]
    out[trail] = stop_values[-1]

    if np.any(inner):
        p = positions[inner]
        # first stop at or beyond p; its predecessor lies strictly before p
        right = np.searchsorted(stop_positions, p, side="left")
        left = right - 1

        width = stop_positions[right] - stop_positions[left]
        has_width = width > 0
        t = np.where(has_width, (p - stop_positions[left]) / np.where(has_width, width, 1.0), 0.0)

        c0 = stop_values[left]
        c1 = stop_values[right]
        out[inner, 0] = hue_lerp(c0[:, 0], c1[:, 0], t)
        out[inner, 1] = c0[:, 1] + (c1[:, 1] - c0[:, 1]) * t
        out[inner, 2] = c0[:, 2] + (c1[:, 2] - c0[:, 2]) * t

    return out


def create_gradient(length: int, stops: Sequence[ColorStop]) -> Gradient:
    """Functional alias of :meth:`Gradient.from_stops`."""
    return Gradient.from_stops(length, stops)
