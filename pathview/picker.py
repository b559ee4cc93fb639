from __future__ import annotations

from typing import Sequence

import numpy as np

from pathview.model import HoverResult, PathEntry
from pathview.viewport import ViewportState


DEFAULT_HIT_THRESHOLD_PX = 8.0


def hit_test(
    cursor: tuple[float, float],
    entries: Sequence[PathEntry],
    viewport: ViewportState,
    threshold_px: float = DEFAULT_HIT_THRESHOLD_PX,
) -> HoverResult | None:
    """First vertex within `threshold_px` of `cursor`, topmost (last drawn) path first.

    Within a path the earliest vertex wins; there is no global nearest search.
    """
    cx, cy = float(cursor[0]), float(cursor[1])
    for entry in reversed(entries):
        if not entry.visible or not entry.points:
            continue
        screen_xy = viewport.to_screen_array(entry.xy())
        dist = np.hypot(screen_xy[:, 0] - cx, screen_xy[:, 1] - cy)
        hits = np.flatnonzero(dist < threshold_px)
        if hits.size == 0:
            continue
        index = int(hits[0])
        point = entry.points[index]
        return HoverResult(path_id=entry.id, index=index, x=point.x, y=point.y, color=entry.color)
    return None
