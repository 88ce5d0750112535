"""Decoding of the ``<num><sep><num>`` pairs accepted on the command line."""

from __future__ import annotations

from typing import Callable, TypeVar

from .errors import MalformedInputError

T = TypeVar("T", int, float)


def parse_pair(text: str, separator: str, kind: Callable[[str], T] = int) -> tuple[T, T]:
    """Split ``text`` at the first ``separator`` and convert both halves with ``kind``.

    ``"10,20"`` gives ``(10, 20)``. Text without the separator, with an empty or
    padded half, digit-group underscores, or a half ``kind`` rejects raises
    :class:`MalformedInputError`; nothing is partially decoded.
    """

    left, found, right = text.partition(separator)
    if not found:
        raise MalformedInputError(f"expected two values separated by {separator!r}, got {text!r}")

    values = []
    for part in (left, right):
        if not part or part != part.strip() or "_" in part:
            raise MalformedInputError(f"malformed value {part!r} in {text!r}")
        try:
            values.append(kind(part))
        except ValueError as exc:
            raise MalformedInputError(f"malformed value {part!r} in {text!r}") from exc
    return values[0], values[1]


def parse_complex(text: str) -> complex:
    """Parse ``"re,im"`` into a complex number, e.g. ``"1.25,-0.0625"``."""

    re, im = parse_pair(text, ",", float)
    return complex(re, im)


def parse_bounds(text: str) -> tuple[int, int]:
    """Parse image dimensions written as ``"WIDTHxHEIGHT"``."""

    width, height = parse_pair(text, "x", int)
    if width <= 0 or height <= 0:
        raise MalformedInputError(f"image dimensions must be positive, got {text!r}")
    return width, height
