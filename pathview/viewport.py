from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from pathview.model import CanvasSize, PathEntry, Point


DEFAULT_BOX_PADDING = 0.1
DEFAULT_CANVAS_PADDING = 0.1


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError("bounding box min must be <= max")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> tuple[float, float]:
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)


DEFAULT_BOUNDING_BOX = BoundingBox(min_x=-1.0, max_x=1.0, min_y=-1.0, max_y=1.0)


@dataclass(frozen=True)
class ViewportState:
    """Origin (screen position of data (0, 0)) plus a uniform pixels-per-unit scale.

    Screen y grows downward, so data y is flipped.
    """

    origin_x: float
    origin_y: float
    scale: float

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise ValueError("viewport scale must be > 0")

    def to_screen(self, point: Point) -> tuple[float, float]:
        return (self.origin_x + point.x * self.scale, self.origin_y - point.y * self.scale)

    def to_screen_array(self, xy: np.ndarray) -> np.ndarray:
        out = np.empty(xy.shape, dtype=np.float64)
        out[:, 0] = self.origin_x + xy[:, 0] * self.scale
        out[:, 1] = self.origin_y - xy[:, 1] * self.scale
        return out

    def to_data(self, sx: float, sy: float) -> Point:
        return Point(x=(sx - self.origin_x) / self.scale, y=(self.origin_y - sy) / self.scale)


def compute_bounding_box(
    entries: Iterable[PathEntry],
    *,
    visible_only: bool = True,
    padding: float = DEFAULT_BOX_PADDING,
) -> BoundingBox:
    chunks = [entry.xy() for entry in entries if entry.visible or not visible_only]
    chunks = [chunk for chunk in chunks if chunk.size]
    if not chunks:
        return DEFAULT_BOUNDING_BOX

    xy = np.concatenate(chunks)
    min_x = float(np.min(xy[:, 0]))
    max_x = float(np.max(xy[:, 0]))
    min_y = float(np.min(xy[:, 1]))
    max_y = float(np.max(xy[:, 1]))

    # Widen before padding: a single point (5, 5) becomes [4, 6] then [3.8, 6.2].
    if min_x == max_x:
        min_x -= 1.0
        max_x += 1.0
    if min_y == max_y:
        min_y -= 1.0
        max_y += 1.0

    range_x = max_x - min_x
    range_y = max_y - min_y
    return BoundingBox(
        min_x=min_x - range_x * padding,
        max_x=max_x + range_x * padding,
        min_y=min_y - range_y * padding,
        max_y=max_y + range_y * padding,
    )


def fit(box: BoundingBox, canvas: CanvasSize, padding: float = DEFAULT_CANVAS_PADDING) -> ViewportState:
    if padding < 0 or padding >= 0.5:
        raise ValueError("canvas padding must be in [0, 0.5)")
    effective_w = canvas.width * (1.0 - padding * 2.0)
    effective_h = canvas.height * (1.0 - padding * 2.0)

    scale_x = effective_w / box.width if box.width > 0 else 1.0
    scale_y = effective_h / box.height if box.height > 0 else 1.0
    scale = min(scale_x, scale_y)

    center_x, center_y = box.center
    return ViewportState(
        origin_x=canvas.width / 2.0 - center_x * scale,
        origin_y=canvas.height / 2.0 + center_y * scale,
        scale=scale,
    )
