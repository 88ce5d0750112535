"""Writing rendered buffers to image files."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
import PIL.Image

from .errors import EncodingError


def write_image(path: Union[str, Path], pixels: np.ndarray, bounds: tuple[int, int]) -> Path:
    """Save ``pixels`` as an 8-bit grayscale PNG of ``bounds`` = ``(width, height)``."""

    output_path = Path(path).expanduser()
    width, height = bounds
    try:
        image = PIL.Image.fromarray(np.asarray(pixels, dtype=np.uint8).reshape(height, width))
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(str(output_path), format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodingError(f"error writing PNG file {output_path}: {exc}") from exc
    return output_path
