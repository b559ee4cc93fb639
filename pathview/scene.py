from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Sequence

from pathview.adapters.parse import ParseResult, parse_paths
from pathview.commands import Clear, DrawCommand
from pathview.errors import PathDataError
from pathview.grid import GridStyle, render_grid
from pathview.model import CanvasSize, HoverResult, PathCollection, PathEntry, Point, path_number
from pathview.paths import PathStyle, render_path
from pathview.picker import DEFAULT_HIT_THRESHOLD_PX, hit_test
from pathview.viewport import DEFAULT_CANVAS_PADDING, ViewportState, compute_bounding_box, fit


LOGGER = logging.getLogger(__name__)

IDLE_STATUS_TEXT = "Hover over a point to see details"


@dataclass(frozen=True)
class SceneConfig:
    grid: GridStyle = field(default_factory=GridStyle)
    path: PathStyle = field(default_factory=PathStyle)
    canvas_padding: float = DEFAULT_CANVAS_PADDING
    hit_threshold_px: float = DEFAULT_HIT_THRESHOLD_PX

    def __post_init__(self) -> None:
        if self.hit_threshold_px <= 0:
            raise ValueError("hit_threshold_px must be > 0")


@dataclass(frozen=True)
class Frame:
    commands: tuple[DrawCommand, ...]
    viewport: ViewportState
    canvas: CanvasSize


def build_frame(
    canvas: CanvasSize,
    entries: Sequence[PathEntry],
    show_labels: bool,
    config: SceneConfig = SceneConfig(),
) -> Frame:
    viewport = fit(compute_bounding_box(entries), canvas, padding=config.canvas_padding)
    commands: list[DrawCommand] = [Clear(width=canvas.width, height=canvas.height)]
    commands.extend(render_grid(viewport, canvas, config.grid))
    for entry in entries:
        if entry.visible:
            commands.extend(render_path(entry, viewport, show_labels, config.path))
    return Frame(commands=tuple(commands), viewport=viewport, canvas=canvas)


def render(
    canvas: CanvasSize,
    entries: Sequence[PathEntry],
    show_labels: bool,
    config: SceneConfig = SceneConfig(),
) -> list[DrawCommand]:
    return list(build_frame(canvas, entries, show_labels, config).commands)


def format_coordinate(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def hover_status_text(hovered: HoverResult | None) -> str:
    if hovered is None:
        return IDLE_STATUS_TEXT
    return (
        f"Path: {path_number(hovered.path_id)} | Index: {hovered.index + 1} | "
        f"Coord: (x: {format_coordinate(hovered.x)}, y: {format_coordinate(hovered.y)})"
    )


class PathScene:
    """Single-threaded owner of the path state; every mutation redraws exactly once."""

    def __init__(
        self,
        canvas: CanvasSize,
        *,
        show_labels: bool = False,
        config: SceneConfig | None = None,
        collection: PathCollection | None = None,
        on_frame: Callable[[Frame], None] | None = None,
    ) -> None:
        self._canvas = canvas
        self._show_labels = bool(show_labels)
        self._config = config or SceneConfig()
        self._collection = collection if collection is not None else PathCollection()
        self._on_frame = on_frame
        self._hovered: HoverResult | None = None
        self._frame: Frame | None = None
        self._redraw_count = 0
        self.redraw()

    @property
    def collection(self) -> PathCollection:
        return self._collection

    @property
    def canvas(self) -> CanvasSize:
        return self._canvas

    @property
    def show_labels(self) -> bool:
        return self._show_labels

    @property
    def hovered(self) -> HoverResult | None:
        return self._hovered

    @property
    def redraw_count(self) -> int:
        return self._redraw_count

    @property
    def frame(self) -> Frame:
        if self._frame is None:
            raise RuntimeError("scene has not been drawn yet")
        return self._frame

    @property
    def viewport(self) -> ViewportState:
        return self.frame.viewport

    def redraw(self) -> Frame:
        frame = build_frame(self._canvas, self._collection.entries, self._show_labels, self._config)
        self._frame = frame
        self._redraw_count += 1
        LOGGER.debug(
            "redraw #%d: %d commands, scale=%.6g",
            self._redraw_count,
            len(frame.commands),
            frame.viewport.scale,
        )
        if self._on_frame is not None:
            self._on_frame(frame)
        return frame

    def load_text(self, text: str) -> ParseResult | None:
        try:
            result = parse_paths(text)
        except PathDataError as exc:
            LOGGER.error("path input rejected: %s", exc)
            return None
        self.replace_paths(result.paths)
        return result

    def replace_paths(self, paths: Sequence[Sequence[Point]]) -> tuple[PathEntry, ...]:
        entries = self._collection.replace(paths)
        self._hovered = None
        self.redraw()
        return entries

    def set_visible(self, path_id: str, visible: bool) -> bool:
        if not self._collection.set_visible(path_id, visible):
            LOGGER.debug("set_visible ignored for unknown path id %s", path_id)
            return False
        self.redraw()
        return True

    def set_closed(self, path_id: str, closed: bool) -> bool:
        if not self._collection.set_closed(path_id, closed):
            LOGGER.debug("set_closed ignored for unknown path id %s", path_id)
            return False
        self.redraw()
        return True

    def resize(self, width: int, height: int) -> None:
        self._canvas = CanvasSize(width=int(width), height=int(height))
        self.redraw()

    def set_show_labels(self, show: bool) -> None:
        self._show_labels = bool(show)
        self.redraw()

    def hit_test(self, x: float, y: float) -> HoverResult | None:
        return hit_test((x, y), self._collection.entries, self.viewport, self._config.hit_threshold_px)

    def pointer_move(self, x: float, y: float) -> bool:
        found = self.hit_test(x, y)
        previous = self._hovered
        self._hovered = found
        prev_target = previous.target if previous is not None else None
        next_target = found.target if found is not None else None
        if prev_target == next_target:
            return False
        self.redraw()
        return True

    def status_text(self) -> str:
        return hover_status_text(self._hovered)
