from __future__ import annotations

import logging
import math


LOGGER = logging.getLogger(__name__)

DEFAULT_WIDTH_FRACTION = 0.7
DEFAULT_HEIGHT_FRACTION = 0.9
DEFAULT_FALLBACK_SCREEN = (1280, 800)
DEFAULT_MIN_WIDTH = 320
DEFAULT_MIN_HEIGHT = 240


def resolve_default_canvas_size(
    *,
    width_fraction: float = DEFAULT_WIDTH_FRACTION,
    height_fraction: float = DEFAULT_HEIGHT_FRACTION,
    min_width: int = DEFAULT_MIN_WIDTH,
    min_height: int = DEFAULT_MIN_HEIGHT,
) -> tuple[int, int]:
    if width_fraction <= 0 or height_fraction <= 0:
        raise ValueError("width_fraction/height_fraction must be > 0")
    if min_width <= 0 or min_height <= 0:
        raise ValueError("min_width/min_height must be > 0")

    screen = _detect_screen_size()
    if screen is None:
        LOGGER.debug("no display detected; using fallback screen size %s", DEFAULT_FALLBACK_SCREEN)
        screen = DEFAULT_FALLBACK_SCREEN
    sw, sh = screen
    width = max(min_width, int(math.floor(sw * width_fraction)))
    height = max(min_height, int(math.floor(sh * height_fraction)))
    return (width, height)


def _detect_screen_size() -> tuple[int, int] | None:
    try:
        import tkinter as tk

        root = tk.Tk()
        root.withdraw()
        width = int(root.winfo_screenwidth())
        height = int(root.winfo_screenheight())
        root.destroy()
        if width > 0 and height > 0:
            return (width, height)
    except Exception:
        return None
    return None
