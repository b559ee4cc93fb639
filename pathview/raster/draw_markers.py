from __future__ import annotations

import numpy as np

from pathview.raster.canvas import RGBA, draw_span


def draw_disc(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA) -> None:
    if radius <= 0:
        return
    r2 = radius * radius
    top = int(np.floor(cy - radius))
    bottom = int(np.ceil(cy + radius))
    for yy in range(top, bottom + 1):
        dy = (yy + 0.5) - cy
        if dy * dy > r2:
            continue
        half = float(np.sqrt(r2 - dy * dy))
        x0 = int(np.ceil(cx - half - 0.5))
        x1 = int(np.floor(cx + half - 0.5))
        if x1 < x0:
            continue
        draw_span(dst, x0, x1, yy, color)
