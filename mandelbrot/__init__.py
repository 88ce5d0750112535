"""Public API for Mandelbrot rendering utilities."""

from .errors import EncodingError, MalformedInputError, MandelbrotError, WorkerFailure
from .output import write_image
from .parallel import (
    DEFAULT_WORKERS,
    Band,
    RenderConfig,
    RenderMethod,
    partition,
    render_bands,
    render_rows,
    render_single,
    render_with,
)
from .parsing import parse_bounds, parse_complex, parse_pair
from .plane import new_buffer, pixel_to_point, plane_axes
from .renderer import ITERATION_LIMIT, escape_time, escape_times, intensity, render

__all__ = [
    "Band",
    "DEFAULT_WORKERS",
    "EncodingError",
    "ITERATION_LIMIT",
    "MalformedInputError",
    "MandelbrotError",
    "RenderConfig",
    "RenderMethod",
    "WorkerFailure",
    "escape_time",
    "escape_times",
    "intensity",
    "new_buffer",
    "parse_bounds",
    "parse_complex",
    "parse_pair",
    "partition",
    "pixel_to_point",
    "plane_axes",
    "render",
    "render_bands",
    "render_rows",
    "render_single",
    "render_with",
    "write_image",
]
