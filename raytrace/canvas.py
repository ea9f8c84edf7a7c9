"""A 2D grid of colours that can be exported as a plain PPM image."""

from __future__ import annotations

import warnings
from pathlib import Path

from raytrace.color import Color

RENDERS_PATH = Path("./renders")
DEFAULT_FILENAME = "test.ppm"
RENDER_COLUMN_MAX = 70
_SOURCE_COMMENT = "# created by raytrace"


class Canvas:
    """A width x height grid of pixels stored in row-major order."""

    def __init__(self, width: int, height: int, color: Color | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        if width * height == 0:
            warnings.warn("canvas has no pixels", RuntimeWarning, stacklevel=2)
        fill = Color.black() if color is None else color
        self._pixels = [fill] * (width * height)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def index(self, x: int, y: int) -> int:
        """Position of pixel (x, y) in row-major order; IndexError if outside."""
        if not self._pixels:
            raise IndexError("canvas has no pixels")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("coordinate is out of bounds")
        return self.width * y + x

    def set_pixel(self, x: int, y: int, color: Color) -> bool:
        """Set pixel (x, y); return False if it lies outside the canvas."""
        try:
            i = self.index(x, y)
        except IndexError:
            return False
        self._pixels[i] = color
        return True

    def get_pixel(self, x: int, y: int) -> Color | None:
        """Colour at (x, y), or None if it lies outside the canvas."""
        try:
            return self._pixels[self.index(x, y)]
        except IndexError:
            return None

    def _channel_values(self):
        for pixel in self._pixels:
            yield from (str(v) for v in pixel.clamped_u8())

    def to_ppm_string(self) -> str:
        """Render the canvas as plain (P3) PPM text, wrapping lines at 70 columns."""
        parts = [f"P3\n{self.width} {self.height}\n255\n{_SOURCE_COMMENT}\n"]
        per_row = self.width * 3
        line_len = 0
        counter = 0
        for value in self._channel_values():
            if counter >= per_row:
                parts.append("\n")
                counter = 0
                line_len = 0
            if line_len + len(value) + 1 > RENDER_COLUMN_MAX:
                parts.append("\n")
                line_len = 0
            parts.append(f"{value} ")
            line_len += len(value) + 1
            counter += 1
        return "".join(parts)

    def write_ppm(
        self, filename: str | None = None, directory: str | Path | None = None
    ) -> Path:
        """Write the canvas as PPM into ``directory`` and return the file path."""
        folder = Path(directory) if directory is not None else RENDERS_PATH
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / (filename or DEFAULT_FILENAME)
        with path.open("w", encoding="ascii", newline="") as f:
            f.write(self.to_ppm_string())
        return path