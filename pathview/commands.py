from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal, Protocol, Sequence, TypeAlias


TextAlign = Literal["left", "center", "right"]
TextBaseline = Literal["top", "middle", "bottom"]


@dataclass(frozen=True)
class Clear:
    width: int
    height: int


@dataclass(frozen=True)
class StrokeLine:
    x0: float
    y0: float
    x1: float
    y1: float
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class StrokePolyline:
    """Open polyline through `points`; `closed` adds the last->first segment."""

    points: tuple[tuple[float, float], ...]
    color: str
    width: float = 1.0
    closed: bool = False

    @property
    def segment_count(self) -> int:
        n = len(self.points)
        if n < 2:
            return 0
        return n if self.closed else n - 1

    def segments(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        pts = self.points
        out = [(pts[i], pts[i + 1]) for i in range(len(pts) - 1)]
        if self.closed and len(pts) >= 2:
            out.append((pts[-1], pts[0]))
        return out


@dataclass(frozen=True)
class FillCircle:
    x: float
    y: float
    radius: float
    color: str


@dataclass(frozen=True)
class FillText:
    x: float
    y: float
    text: str
    color: str
    font_px: float = 10.0
    align: TextAlign = "center"
    baseline: TextBaseline = "middle"


DrawCommand: TypeAlias = Clear | StrokeLine | StrokePolyline | FillCircle | FillText


class DrawingSurface(Protocol):
    """Backend-agnostic 2D surface the draw commands are replayed onto."""

    def clear(self, width: int, height: int) -> None:
        ...

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float) -> None:
        ...

    def stroke_polyline(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        width: float,
        closed: bool,
    ) -> None:
        ...

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        ...

    def fill_text(
        self,
        x: float,
        y: float,
        text: str,
        color: str,
        font_px: float,
        align: TextAlign,
        baseline: TextBaseline,
    ) -> None:
        ...


def replay(commands: Iterable[DrawCommand], surface: DrawingSurface) -> int:
    count = 0
    for cmd in commands:
        if isinstance(cmd, Clear):
            surface.clear(cmd.width, cmd.height)
        elif isinstance(cmd, StrokeLine):
            surface.stroke_line(cmd.x0, cmd.y0, cmd.x1, cmd.y1, cmd.color, cmd.width)
        elif isinstance(cmd, StrokePolyline):
            surface.stroke_polyline(cmd.points, cmd.color, cmd.width, cmd.closed)
        elif isinstance(cmd, FillCircle):
            surface.fill_circle(cmd.x, cmd.y, cmd.radius, cmd.color)
        elif isinstance(cmd, FillText):
            surface.fill_text(cmd.x, cmd.y, cmd.text, cmd.color, cmd.font_px, cmd.align, cmd.baseline)
        else:
            raise TypeError(f"unsupported draw command: {type(cmd)!r}")
        count += 1
    return count


@dataclass
class RecordingSurface:
    calls: list[tuple[str, tuple[object, ...]]] = field(default_factory=list)

    def clear(self, width: int, height: int) -> None:
        self.calls.append(("clear", (width, height)))

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float) -> None:
        self.calls.append(("stroke_line", (x0, y0, x1, y1, color, width)))

    def stroke_polyline(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        width: float,
        closed: bool,
    ) -> None:
        self.calls.append(("stroke_polyline", (tuple(points), color, width, closed)))

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self.calls.append(("fill_circle", (x, y, radius, color)))

    def fill_text(
        self,
        x: float,
        y: float,
        text: str,
        color: str,
        font_px: float,
        align: TextAlign,
        baseline: TextBaseline,
    ) -> None:
        self.calls.append(("fill_text", (x, y, text, color, font_px, align, baseline)))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]
