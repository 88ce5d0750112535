"""Strategies that spread a render over disjoint bands of the pixel buffer."""

from __future__ import annotations

import enum
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import WorkerFailure
from .plane import pixel_to_point
from .renderer import render

DEFAULT_WORKERS = 8


class RenderMethod(enum.Enum):
    """How a render is scheduled; the output is identical for every method."""

    SINGLE = "single"
    BANDS = "bands"
    ROWS = "rows"


@dataclass(frozen=True)
class RenderConfig:
    """Scheduling knobs for a render."""

    method: RenderMethod = RenderMethod.ROWS
    workers: int = DEFAULT_WORKERS
    pool_size: Optional[int] = None


@dataclass(frozen=True)
class Band:
    """A contiguous run of full-width rows and the plane rectangle it covers."""

    index: int
    top: int
    bounds: tuple[int, int]
    upper_left: complex
    lower_right: complex
    start: int
    stop: int

    @property
    def rows(self) -> range:
        """Image rows covered by the band."""

        return range(self.top, self.top + self.bounds[1])


def partition(
    pixels: np.ndarray,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
    rows_per_band: int,
) -> list[Band]:
    """Split the image into bands of ``rows_per_band`` rows (the last may be shorter).

    Band corners are mapped with the full image ``bounds`` so every band lines
    up with its neighbours in the plane. Buffer ranges are derived from the
    buffer length alone and are pairwise disjoint.
    """

    width, height = bounds
    if width <= 0 or height <= 0:
        raise ValueError(f"image bounds must be positive, got {width}x{height}")
    if pixels.size != width * height:
        raise ValueError(f"buffer holds {pixels.size} pixels, expected {width}x{height}")
    if rows_per_band <= 0:
        raise ValueError(f"rows_per_band must be positive, got {rows_per_band}")

    band_length = rows_per_band * width
    bands = []
    for index, start in enumerate(range(0, pixels.size, band_length)):
        stop = min(start + band_length, pixels.size)
        top = index * rows_per_band
        rows = (stop - start) // width
        bands.append(
            Band(
                index=index,
                top=top,
                bounds=(width, rows),
                upper_left=pixel_to_point(bounds, (0, top), upper_left, lower_right),
                lower_right=pixel_to_point(bounds, (width, top + rows), upper_left, lower_right),
                start=start,
                stop=stop,
            )
        )
    return bands


def render_band(
    view: np.ndarray,
    band: Band,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> None:
    """Render ``band`` into ``view``, the slice of the image buffer it owns.

    Pixels are sampled with the whole image's mapping, so a band holds exactly
    the bytes a sequential render writes to those rows.
    """

    render(view, bounds, upper_left, lower_right, band.rows)


def render_single(
    pixels: np.ndarray,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> None:
    """Render the whole image on the calling thread."""

    render(pixels, bounds, upper_left, lower_right)


def render_bands(
    pixels: np.ndarray,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
    workers: int = DEFAULT_WORKERS,
) -> None:
    """Render with one thread per band, ``ceil(height / workers)`` rows each."""

    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")
    rows_per_band = -(-bounds[1] // workers)
    bands = partition(pixels, bounds, upper_left, lower_right, rows_per_band)
    with ThreadPoolExecutor(max_workers=len(bands), thread_name_prefix="mandelbrot-band") as executor:
        _run(executor, pixels, bands, bounds, upper_left, lower_right)


def render_rows(
    pixels: np.ndarray,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
    pool_size: Optional[int] = None,
) -> None:
    """Render every row as its own task on a bounded thread pool."""

    if pool_size is not None and pool_size <= 0:
        raise ValueError(f"pool_size must be positive, got {pool_size}")
    bands = partition(pixels, bounds, upper_left, lower_right, 1)
    with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="mandelbrot-row") as executor:
        _run(executor, pixels, bands, bounds, upper_left, lower_right)


def _run(
    executor: ThreadPoolExecutor,
    pixels: np.ndarray,
    bands: list[Band],
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> None:
    # Views are cut before any task starts and never change afterwards.
    views = [pixels[band.start:band.stop] for band in bands]
    futures: dict[Future, Band] = {
        executor.submit(render_band, view, band, bounds, upper_left, lower_right): band
        for band, view in zip(bands, views)
    }
    for future in as_completed(futures):
        error = future.exception()
        if error is not None:
            for pending in futures:
                pending.cancel()
            raise WorkerFailure(futures[future], error) from error


def render_with(
    config: RenderConfig,
    pixels: np.ndarray,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> None:
    """Render with the strategy and knobs selected by ``config``."""

    if config.method is RenderMethod.SINGLE:
        render_single(pixels, bounds, upper_left, lower_right)
    elif config.method is RenderMethod.BANDS:
        render_bands(pixels, bounds, upper_left, lower_right, workers=config.workers)
    elif config.method is RenderMethod.ROWS:
        render_rows(pixels, bounds, upper_left, lower_right, pool_size=config.pool_size)
    else:
        raise ValueError(f"unknown render method {config.method!r}")
