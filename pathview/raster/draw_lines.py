from __future__ import annotations

import numpy as np

from pathview.raster.canvas import RGBA, draw_pixel


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1, closed: bool = False) -> None:
    if xs.size < 2:
        return
    for i in range(xs.size - 1):
        draw_line(dst, int(xs[i]), int(ys[i]), int(xs[i + 1]), int(ys[i + 1]), color=color, width=width)
    if closed:
        draw_line(dst, int(xs[-1]), int(ys[-1]), int(xs[0]), int(ys[0]), color=color, width=width)


def draw_line(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
    # Clip to the padded canvas before walking pixels.
    clipped = _clip_segment(x0, y0, x1, y1, dst.shape[1], dst.shape[0], pad=max(1, width))
    if clipped is None:
        return
    x0, y0, x1, y1 = clipped
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)


def _clip_segment(
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    width: int,
    height: int,
    *,
    pad: int,
) -> tuple[int, int, int, int] | None:
    """Liang-Barsky clip against the canvas grown by `pad` pixels on every side."""
    xmin, ymin = -pad, -pad
    xmax, ymax = width - 1 + pad, height - 1 + pad
    dx = float(x1 - x0)
    dy = float(y1 - y0)
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (
        int(round(x0 + t0 * dx)),
        int(round(y0 + t0 * dy)),
        int(round(x0 + t1 * dx)),
        int(round(y0 + t1 * dy)),
    )
