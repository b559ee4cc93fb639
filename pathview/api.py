from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from pathview.commands import DrawCommand, replay
from pathview.display import resolve_default_canvas_size
from pathview.model import CanvasSize, PathEntry
from pathview.raster import RasterSurface
from pathview.scene import Frame, PathScene, SceneConfig, render


def viewer(
    width: int | None = None,
    height: int | None = None,
    *,
    show_labels: bool = False,
    config: SceneConfig | None = None,
    on_frame: Callable[[Frame], None] | None = None,
) -> PathScene:
    if width is None or height is None:
        default_w, default_h = resolve_default_canvas_size()
        width = default_w if width is None else width
        height = default_h if height is None else height
    return PathScene(
        CanvasSize(width=width, height=height),
        show_labels=show_labels,
        config=config,
        on_frame=on_frame,
    )


def rasterize(commands: Sequence[DrawCommand], canvas: CanvasSize, surface: RasterSurface | None = None) -> np.ndarray:
    target = surface if surface is not None else RasterSurface(canvas.width, canvas.height)
    replay(commands, target)
    return target.rgba()


def render_to_rgba(
    entries: Sequence[PathEntry],
    width: int,
    height: int,
    *,
    show_labels: bool = False,
    config: SceneConfig | None = None,
) -> np.ndarray:
    canvas = CanvasSize(width=width, height=height)
    return rasterize(render(canvas, entries, show_labels, config or SceneConfig()), canvas)
