from __future__ import annotations

from dataclasses import dataclass
import math

from pathview.commands import DrawCommand, FillText, StrokeLine, TextAlign
from pathview.model import CanvasSize
from pathview.viewport import ViewportState


NICE_STEPS = (0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 50.0, 100.0, 200.0, 500.0, 1000.0, 2000.0, 5000.0)
DEFAULT_MIN_TICK_SPACING = 50.0


@dataclass(frozen=True)
class GridStyle:
    min_tick_spacing: float = DEFAULT_MIN_TICK_SPACING
    grid_color: str = "#e0e0e0"
    axis_color: str = "#666"
    text_color: str = "#333"
    grid_width: float = 1.0
    axis_width: float = 2.0
    font_px: float = 10.0
    label_offset: float = 15.0
    edge_inset: float = 15.0
    right_edge_inset: float = 25.0
    left_align_threshold: float = 30.0

    def __post_init__(self) -> None:
        if self.min_tick_spacing <= 0:
            raise ValueError("min_tick_spacing must be > 0")


def choose_tick_interval(scale: float, min_pixel_spacing: float, canvas_width: float) -> float:
    approx_tick_count = math.floor(canvas_width / min_pixel_spacing)
    if approx_tick_count == 0:
        return 1.0
    rough_interval = (canvas_width / scale) / approx_tick_count
    for step in NICE_STEPS:
        if step >= rough_interval:
            return step
    return NICE_STEPS[-1]


def precision_for_interval(interval: float) -> int:
    value = float(interval)
    if value == 0 or value.is_integer():
        return 0
    text = repr(value)
    if "e-" in text:
        return int(text.split("e-", 1)[1])
    _, _, frac = text.partition(".")
    return len(frac)


def format_tick_value(value: float, precision: int) -> str:
    out = f"{value:.{precision}f}"
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


def tick_stride(interval: float, scale: float, min_pixel_spacing: float) -> int:
    """Multiple of `interval` between drawn ticks once the largest nice step is still too dense."""
    spacing = interval * scale
    if spacing <= 0 or spacing >= min_pixel_spacing * (1.0 - 1e-9):
        return 1
    return max(1, math.ceil(min_pixel_spacing / spacing))


def tick_values(start_unit: float, end_unit: float, interval: float, stride: int = 1) -> list[float]:
    # Ticks are k * interval for integer k, k a multiple of stride.
    first = (math.floor(start_unit / interval) // stride) * stride
    last = -(-math.ceil(end_unit / interval) // stride) * stride
    return [k * interval for k in range(first, last + 1, stride)]


def visible_x_ticks(viewport: ViewportState, canvas: CanvasSize, interval: float, stride: int = 1) -> list[float]:
    start = (-viewport.origin_x / viewport.scale)
    end = (canvas.width - viewport.origin_x) / viewport.scale
    return tick_values(start, end, interval, stride)


def visible_y_ticks(viewport: ViewportState, canvas: CanvasSize, interval: float, stride: int = 1) -> list[float]:
    start = -(canvas.height - viewport.origin_y) / viewport.scale
    end = viewport.origin_y / viewport.scale
    return tick_values(start, end, interval, stride)


def is_main_axis(value: float, interval: float) -> bool:
    return abs(value) < interval / 1000.0


def x_label_baseline(origin_y: float, canvas_height: float, style: GridStyle = GridStyle()) -> float:
    baseline = origin_y + style.label_offset
    if origin_y < 0:
        baseline = style.edge_inset
    if origin_y > canvas_height:
        baseline = canvas_height - style.edge_inset
    return baseline


def y_label_anchor(origin_x: float, canvas_width: float, style: GridStyle = GridStyle()) -> tuple[float, TextAlign]:
    anchor = origin_x - style.label_offset
    if origin_x < 0:
        anchor = style.edge_inset
    if origin_x > canvas_width:
        anchor = canvas_width - style.right_edge_inset
    align: TextAlign = "left" if anchor < style.left_align_threshold else "right"
    return anchor, align


def render_grid(
    viewport: ViewportState,
    canvas: CanvasSize,
    style: GridStyle = GridStyle(),
) -> list[DrawCommand]:
    interval = choose_tick_interval(viewport.scale, style.min_tick_spacing, canvas.width)
    precision = precision_for_interval(interval)
    stride = tick_stride(interval, viewport.scale, style.min_tick_spacing)
    x_ticks = visible_x_ticks(viewport, canvas, interval, stride)
    y_ticks = visible_y_ticks(viewport, canvas, interval, stride)
    commands: list[DrawCommand] = []

    for value in x_ticks:
        x = viewport.origin_x + value * viewport.scale
        if x < -1 or x > canvas.width + 1:
            continue
        commands.append(_grid_line(x, 0.0, x, float(canvas.height), is_main_axis(value, interval), style))

    for value in y_ticks:
        y = viewport.origin_y - value * viewport.scale
        if y < -1 or y > canvas.height + 1:
            continue
        commands.append(_grid_line(0.0, y, float(canvas.width), y, is_main_axis(value, interval), style))

    label_y = x_label_baseline(viewport.origin_y, canvas.height, style)
    for value in x_ticks:
        if is_main_axis(value, interval):
            continue
        x = viewport.origin_x + value * viewport.scale
        if 0 <= x <= canvas.width:
            commands.append(
                FillText(
                    x=x,
                    y=label_y,
                    text=format_tick_value(value, precision),
                    color=style.text_color,
                    font_px=style.font_px,
                    align="center",
                    baseline="middle",
                )
            )

    label_x, align = y_label_anchor(viewport.origin_x, canvas.width, style)
    for value in y_ticks:
        if is_main_axis(value, interval):
            continue
        y = viewport.origin_y - value * viewport.scale
        if 0 <= y <= canvas.height:
            commands.append(
                FillText(
                    x=label_x,
                    y=y,
                    text=format_tick_value(value, precision),
                    color=style.text_color,
                    font_px=style.font_px,
                    align=align,
                    baseline="middle",
                )
            )
    return commands


def _grid_line(x0: float, y0: float, x1: float, y1: float, main_axis: bool, style: GridStyle) -> StrokeLine:
    if main_axis:
        return StrokeLine(x0=x0, y0=y0, x1=x1, y1=y1, color=style.axis_color, width=style.axis_width)
    return StrokeLine(x0=x0, y0=y0, x1=x1, y1=y1, color=style.grid_color, width=style.grid_width)
