from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image

from pathview.commands import TextAlign, TextBaseline
from pathview.raster.canvas import RGBA, fill, new_canvas, resolve_color
from pathview.raster.draw_lines import draw_line, draw_polyline
from pathview.raster.draw_markers import draw_disc
from pathview.raster.draw_text import DEFAULT_FONT_FAMILY, draw_text_anchored


class RasterSurface:
    """Software RGBA255 surface implementing the drawing-surface commands."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: RGBA = (255, 255, 255, 255),
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.background = background
        self.font_family = font_family
        self._frame = new_canvas(width, height, color=background)

    @property
    def width(self) -> int:
        return int(self._frame.shape[1])

    @property
    def height(self) -> int:
        return int(self._frame.shape[0])

    def rgba(self) -> np.ndarray:
        return self._frame.copy()

    def clear(self, width: int, height: int) -> None:
        if (height, width) != self._frame.shape[:2]:
            self._frame = new_canvas(width, height, color=self.background)
            return
        fill(self._frame, self.background)

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float) -> None:
        draw_line(
            self._frame,
            int(round(x0)),
            int(round(y0)),
            int(round(x1)),
            int(round(y1)),
            color=resolve_color(color),
            width=_brush_width(width),
        )

    def stroke_polyline(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        width: float,
        closed: bool,
    ) -> None:
        if len(points) < 2:
            return
        xy = np.rint(np.asarray(points, dtype=np.float64)).astype(np.int32)
        draw_polyline(
            self._frame,
            xy[:, 0],
            xy[:, 1],
            color=resolve_color(color),
            width=_brush_width(width),
            closed=closed,
        )

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        draw_disc(self._frame, x, y, radius, resolve_color(color))

    def fill_text(
        self,
        x: float,
        y: float,
        text: str,
        color: str,
        font_px: float,
        align: TextAlign,
        baseline: TextBaseline,
    ) -> None:
        draw_text_anchored(
            self._frame,
            x,
            y,
            text,
            resolve_color(color),
            align=align,
            baseline=baseline,
            font_family=self.font_family,
            font_size_px=font_px,
        )

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._frame)

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        self.to_image().save(out, format="PNG")
        return out


def _brush_width(width: float) -> int:
    return max(1, int(round(width)))
