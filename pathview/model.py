from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np


DEFAULT_PATH_COLORS = ("blue", "red", "green", "purple", "orange", "darkcyan", "magenta", "brown")
DEFAULT_THICKNESS = 3.0


def path_number(path_id: str) -> str:
    # "path-7" -> "7"; ids supplied by callers are returned as-is.
    prefix, sep, suffix = path_id.rpartition("-")
    return suffix if sep and prefix else path_id


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class CanvasSize:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas width and height must be > 0")


@dataclass
class PathEntry:
    id: str
    points: tuple[Point, ...]
    color: str
    thickness: float = DEFAULT_THICKNESS
    visible: bool = True
    closed: bool = False

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("thickness must be > 0")
        self.points = tuple(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def number(self) -> str:
        return path_number(self.id)

    def xy(self) -> np.ndarray:
        if not self.points:
            return np.zeros((0, 2), dtype=np.float64)
        return np.asarray([(p.x, p.y) for p in self.points], dtype=np.float64)


@dataclass(frozen=True)
class HoverResult:
    path_id: str
    index: int
    x: float
    y: float
    color: str | None = None

    @property
    def target(self) -> tuple[str, int]:
        return (self.path_id, self.index)


@dataclass
class PathCollection:
    """Owned path state: wholesale replaced on reparse, flag-mutated in between."""

    colors: tuple[str, ...] = DEFAULT_PATH_COLORS
    default_thickness: float = DEFAULT_THICKNESS
    _entries: list[PathEntry] = field(default_factory=list)
    _next_id: int = 0
    _color_index: int = 0

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError("colors must be non-empty")
        if self.default_thickness <= 0:
            raise ValueError("default_thickness must be > 0")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PathEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> tuple[PathEntry, ...]:
        return tuple(self._entries)

    def visible_entries(self) -> list[PathEntry]:
        return [entry for entry in self._entries if entry.visible]

    def get(self, path_id: str) -> PathEntry | None:
        for entry in self._entries:
            if entry.id == path_id:
                return entry
        return None

    def replace(self, paths: Sequence[Sequence[Point]]) -> tuple[PathEntry, ...]:
        self._entries = []
        self._color_index = 0
        for points in paths:
            self._entries.append(
                PathEntry(
                    id=f"path-{self._next_id}",
                    points=tuple(points),
                    color=self._next_color(),
                    thickness=self.default_thickness,
                )
            )
            self._next_id += 1
        return self.entries

    def set_visible(self, path_id: str, visible: bool) -> bool:
        entry = self.get(path_id)
        if entry is None:
            return False
        entry.visible = bool(visible)
        return True

    def set_closed(self, path_id: str, closed: bool) -> bool:
        entry = self.get(path_id)
        if entry is None:
            return False
        entry.closed = bool(closed)
        return True

    def _next_color(self) -> str:
        color = self.colors[self._color_index % len(self.colors)]
        self._color_index += 1
        return color
