from pathview.adapters import ParseResult, coerce_path, parse_paths
from pathview.api import rasterize, render_to_rgba, viewer
from pathview.commands import Clear, DrawingSurface, FillCircle, FillText, RecordingSurface, StrokeLine, StrokePolyline, replay
from pathview.errors import PathDataError
from pathview.grid import GridStyle, choose_tick_interval, precision_for_interval
from pathview.model import CanvasSize, HoverResult, PathCollection, PathEntry, Point
from pathview.paths import PathStyle, label_direction
from pathview.picker import hit_test
from pathview.scene import Frame, PathScene, SceneConfig, build_frame, render
from pathview.viewport import BoundingBox, ViewportState, compute_bounding_box, fit

__all__ = [
    "BoundingBox",
    "CanvasSize",
    "Clear",
    "DrawingSurface",
    "FillCircle",
    "FillText",
    "Frame",
    "GridStyle",
    "HoverResult",
    "ParseResult",
    "PathCollection",
    "PathDataError",
    "PathEntry",
    "PathScene",
    "PathStyle",
    "Point",
    "RecordingSurface",
    "SceneConfig",
    "StrokeLine",
    "StrokePolyline",
    "ViewportState",
    "build_frame",
    "choose_tick_interval",
    "coerce_path",
    "compute_bounding_box",
    "fit",
    "hit_test",
    "label_direction",
    "parse_paths",
    "precision_for_interval",
    "rasterize",
    "render",
    "render_to_rgba",
    "replay",
    "viewer",
]
