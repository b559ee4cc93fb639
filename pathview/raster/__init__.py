from .canvas import draw_pixel, draw_span, new_canvas, resolve_color
from .draw_lines import draw_line, draw_polyline
from .draw_markers import draw_disc
from .draw_text import draw_text, draw_text_anchored, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "draw_disc",
    "draw_line",
    "draw_pixel",
    "draw_polyline",
    "draw_span",
    "draw_text",
    "draw_text_anchored",
    "new_canvas",
    "resolve_color",
    "text_size",
]
