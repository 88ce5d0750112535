"""Mapping between pixel coordinates and points of the complex plane."""

from __future__ import annotations

from typing import Optional

import numpy as np


def pixel_to_point(
    bounds: tuple[int, int],
    pixel: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> complex:
    """Return the complex point sampled by ``pixel`` = ``(column, row)``.

    The image spans ``bounds`` = ``(width, height)`` pixels and covers the plane
    rectangle from ``upper_left`` to ``lower_right``. Rows grow downward while
    the imaginary axis grows upward. Coordinates outside the image are not
    rejected, they extrapolate linearly.
    """

    width = lower_right.real - upper_left.real
    height = upper_left.imag - lower_right.imag
    return complex(
        upper_left.real + pixel[0] * width / bounds[0],
        upper_left.imag - pixel[1] * height / bounds[1],
    )


def plane_axes(
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
    rows: Optional[range] = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Return the real part of every column and the imaginary part of every row.

    Uses the same arithmetic as :func:`pixel_to_point`, element for element.
    ``rows`` restricts the imaginary axis to a run of rows of the image.
    """

    width = lower_right.real - upper_left.real
    height = upper_left.imag - lower_right.imag
    columns = np.arange(bounds[0], dtype=np.float64)
    if rows is None:
        rows = range(bounds[1])
    row_numbers = np.arange(rows.start, rows.stop, dtype=np.float64)
    return upper_left.real + columns * width / bounds[0], upper_left.imag - row_numbers * height / bounds[1]


def new_buffer(bounds: tuple[int, int]) -> np.ndarray:
    """Allocate a zeroed row-major grayscale buffer for ``bounds``."""

    return np.zeros(bounds[0] * bounds[1], dtype=np.uint8)
