from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from pathview.commands import DrawCommand, FillCircle, FillText, StrokePolyline
from pathview.model import PathEntry
from pathview.viewport import ViewportState


DEFAULT_DIRECTION = (0.0, -1.0)
COLLINEAR_EPS = 1e-3


@dataclass(frozen=True)
class PathStyle:
    label_offset: float = 15.0
    label_font_px: float = 16.0
    dot_radius_pad: float = 2.0

    def dot_radius(self, thickness: float) -> float:
        return thickness / 2.0 + self.dot_radius_pad


def neighbor_indices(index: int, count: int, closed: bool) -> tuple[int | None, int | None]:
    if closed:
        return ((index - 1 + count) % count, (index + 1) % count)
    prev_idx = index - 1 if index > 0 else None
    next_idx = index + 1 if index < count - 1 else None
    return prev_idx, next_idx


def _unit(dx: float, dy: float) -> tuple[float, float]:
    length = math.hypot(dx, dy)
    if length == 0:
        return (0.0, 0.0)
    return (dx / length, dy / length)


def label_direction(screen_xy: np.ndarray, index: int, closed: bool) -> tuple[float, float]:
    """Outward unit vector from vertex `index` that keeps its label off the adjacent segments."""
    count = int(screen_xy.shape[0])
    cx, cy = float(screen_xy[index, 0]), float(screen_xy[index, 1])
    prev_idx, next_idx = neighbor_indices(index, count, closed)
    if count < 2:
        prev_idx = next_idx = None

    v_prev = None
    v_next = None
    if prev_idx is not None:
        v_prev = _unit(float(screen_xy[prev_idx, 0]) - cx, float(screen_xy[prev_idx, 1]) - cy)
    if next_idx is not None:
        v_next = _unit(float(screen_xy[next_idx, 0]) - cx, float(screen_xy[next_idx, 1]) - cy)

    if v_prev is not None and v_next is not None:
        sum_x = v_prev[0] + v_next[0]
        sum_y = v_prev[1] + v_next[1]
        if abs(sum_x) < COLLINEAR_EPS and abs(sum_y) < COLLINEAR_EPS:
            # Straight-through vertex: go perpendicular to the incoming segment.
            return (-v_prev[1], v_prev[0])
        bx, by = _unit(sum_x, sum_y)
        return (-bx, -by)
    if v_prev is not None:
        return (-v_prev[0], -v_prev[1])
    if v_next is not None:
        return (-v_next[0], -v_next[1])
    return DEFAULT_DIRECTION


def label_anchor(
    screen_xy: np.ndarray,
    index: int,
    closed: bool,
    offset: float,
) -> tuple[float, float]:
    dx, dy = label_direction(screen_xy, index, closed)
    return (float(screen_xy[index, 0]) + dx * offset, float(screen_xy[index, 1]) + dy * offset)


def render_path(
    entry: PathEntry,
    viewport: ViewportState,
    show_labels: bool,
    style: PathStyle = PathStyle(),
) -> list[DrawCommand]:
    if not entry.points:
        return []
    screen_xy = viewport.to_screen_array(entry.xy())
    points = tuple((float(x), float(y)) for x, y in screen_xy.tolist())
    commands: list[DrawCommand] = []

    if len(points) >= 2:
        commands.append(StrokePolyline(points=points, color=entry.color, width=entry.thickness, closed=entry.closed))

    if not show_labels:
        return commands

    radius = style.dot_radius(entry.thickness)
    for index, (x, y) in enumerate(points):
        commands.append(FillCircle(x=x, y=y, radius=radius, color=entry.color))
        lx, ly = label_anchor(screen_xy, index, entry.closed, style.label_offset)
        commands.append(
            FillText(
                x=lx,
                y=ly,
                text=str(index + 1),
                color=entry.color,
                font_px=style.label_font_px,
                align="center",
                baseline="middle",
            )
        )
    return commands
