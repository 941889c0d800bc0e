"""
Canvas: a rectangular grid of pixels, written out as plain-text PPM.

PPM layout:
    P3
    <width> <height>
    <max color value>
    <r g b>        (one line per pixel, row-major)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from raytracer.core.config import settings
from raytracer.core.errors import CanvasError
from raytracer.core.logging import get_context_logger
from raytracer.math.color import BLACK, Color

PPM_MAGIC = "P3"


class Canvas:
    """
    Rectangular grid of pixels.

    Every pixel starts as the fill color (black by default).
    """

    def __init__(self, width: int, height: int, color: Color = BLACK):
        """
        Initialize canvas.

        Args:
            width: Number of pixel columns
            height: Number of pixel rows
            color: Initial color of every pixel
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: list[Color] = [color] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> list[Color]:
        """Pixels in row-major order."""
        return self._pixels

    def _pixel_index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise CanvasError(x, y, self._width, self._height)
        return x + y * self._width

    def pixel(self, x: int, y: int) -> Color:
        """Color at column x, row y."""
        return self._pixels[self._pixel_index(x, y)]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Paint the pixel at column x, row y."""
        self._pixels[self._pixel_index(x, y)] = color

    def ppm_lines(self, max_value: int | None = None) -> Iterator[str]:
        """Lines of the PPM image, header first, without line terminators."""
        if max_value is None:
            max_value = settings.PPM_MAX_COLOR_VALUE

        yield PPM_MAGIC
        yield f"{self._width} {self._height}"
        yield str(max_value)
        for pixel in self._pixels:
            yield pixel.to_ppm(max_value)

    def to_ppm(self, max_value: int | None = None) -> str:
        """Render the whole image as PPM text."""
        return "".join(f"{line}\n" for line in self.ppm_lines(max_value))

    def write_ppm(self, path: str | Path, max_value: int | None = None) -> Path:
        """
        Write the canvas to a PPM file.

        Args:
            path: Destination file; parent directories are created
            max_value: Maximum channel value (None = settings.PPM_MAX_COLOR_VALUE)

        Returns:
            The path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w", encoding="ascii") as f:
            for line in self.ppm_lines(max_value):
                f.write(f"{line}\n")

        logger = get_context_logger(__name__, width=self._width, height=self._height)
        logger.info(
            "Wrote %dx%d canvas to %s",
            self._width,
            self._height,
            path,
            extra_data={"path": str(path)},
        )
        return path
