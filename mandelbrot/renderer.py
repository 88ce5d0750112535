"""Rendering primitives for grayscale Mandelbrot bitmaps."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .plane import plane_axes

ITERATION_LIMIT = 255
ESCAPE_RADIUS_SQUARED = 4.0


def escape_time(c: complex, limit: int) -> Optional[int]:
    """Return the iteration at which ``z -> z*z + c`` leaves the radius 2 disk.

    Iteration starts from ``z = 0`` and runs at most ``limit`` times. The result
    is the 0-based index of the first iteration where ``|z|^2 > 4``, or ``None``
    when the orbit stays bounded for all ``limit`` steps.
    """

    re, im = 0.0, 0.0
    c_re, c_im = c.real, c.imag
    for i in range(limit):
        re, im = re * re - im * im + c_re, 2.0 * re * im + c_im
        if re * re + im * im > ESCAPE_RADIUS_SQUARED:
            return i
    return None


def escape_times(points: np.ndarray, limit: int) -> np.ndarray:
    """Vectorized :func:`escape_time`; ``-1`` marks points that never escaped."""

    points = np.asarray(points, dtype=np.complex128)
    counts = np.full(points.shape, -1, dtype=np.int64)
    flat_counts = counts.reshape(-1)

    c_re = np.ascontiguousarray(points.real).reshape(-1)
    c_im = np.ascontiguousarray(points.imag).reshape(-1)
    active = np.arange(c_re.size)
    re = np.zeros_like(c_re)
    im = np.zeros_like(c_im)

    for i in range(limit):
        if active.size == 0:
            break
        re, im = re * re - im * im + c_re, 2.0 * re * im + c_im
        escaped = re * re + im * im > ESCAPE_RADIUS_SQUARED
        if escaped.any():
            flat_counts[active[escaped]] = i
            bounded = ~escaped
            active = active[bounded]
            re, im = re[bounded], im[bounded]
            c_re, c_im = c_re[bounded], c_im[bounded]

    return counts


def intensity(count: Optional[int]) -> int:
    """Gray level of a pixel: dark when slow to escape, black inside the set."""

    if count is None:
        return 0
    return 255 - count


def render(
    pixels: np.ndarray,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
    rows: Optional[range] = None,
) -> None:
    """Fill ``pixels`` in row-major order with the escape-time bitmap of a rectangle.

    ``bounds`` is the ``(width, height)`` of the image whose plane corners are
    ``upper_left`` and ``lower_right``. When ``rows`` is given, ``pixels`` holds
    only that run of full-width rows, sampled exactly as the whole image would
    sample them.
    """

    width = bounds[0]
    if rows is None:
        rows = range(bounds[1])
    height = len(rows)
    if pixels.size != width * height:
        raise ValueError(f"buffer holds {pixels.size} pixels, expected {width}x{height}")

    re, im = plane_axes(bounds, upper_left, lower_right, rows)
    points = np.empty((height, width), dtype=np.complex128)
    points.real = re[np.newaxis, :]
    points.imag = im[:, np.newaxis]

    counts = escape_times(points, ITERATION_LIMIT)
    gray = np.where(counts < 0, 0, 255 - counts)
    pixels[:] = gray.reshape(-1).astype(np.uint8)
