"""Exception types raised while rendering Mandelbrot bitmaps."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parallel import Band


class MandelbrotError(Exception):
    """Base class for every failure reported by this package."""


class MalformedInputError(MandelbrotError, ValueError):
    """Raised when numeric text cannot be decoded into the requested pair."""


class WorkerFailure(MandelbrotError, RuntimeError):
    """A concurrent rendering task failed; the whole render is aborted."""

    def __init__(self, band: Band, cause: BaseException) -> None:
        last_row = band.top + band.bounds[1]
        super().__init__(f"band {band.index} (rows {band.top}..{last_row}) failed: {cause!r}")
        self.band = band


class EncodingError(MandelbrotError, OSError):
    """Raised when the rendered bitmap cannot be written to disk."""
