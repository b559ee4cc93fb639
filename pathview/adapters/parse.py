from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
import json
import logging
import math
import re
from typing import Any

import numpy as np

from pathview.errors import PathDataError
from pathview.model import Point


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


LOGGER = logging.getLogger(__name__)

# `{x:10, y:20}` -> `{"x":10, "y":20}` so object-literal input parses as JSON.
_BARE_KEY = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)(\s*:)")


@dataclass(frozen=True)
class ParseResult:
    paths: tuple[tuple[Point, ...], ...]
    rejected: tuple[int, ...] = ()


def parse_paths(text: str) -> ParseResult:
    raw = _load_structured(text)
    if not isinstance(raw, list):
        raise PathDataError("path input must be a list of paths")

    paths: list[tuple[Point, ...]] = []
    rejected: list[int] = []
    for line_no, item in enumerate(raw, start=1):
        try:
            paths.append(_points_from_mappings(item))
        except PathDataError as exc:
            LOGGER.warning("Line %d: invalid path format (%s)", line_no, exc)
            rejected.append(line_no)
    return ParseResult(paths=tuple(paths), rejected=tuple(rejected))


def coerce_path(value: Any) -> tuple[Point, ...]:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _points_from_array(tensor.to(torch.float64).numpy())

    if pd is not None and isinstance(value, pd.DataFrame):
        missing = [col for col in ("x", "y") if col not in value.columns]
        if missing:
            raise PathDataError(f"DataFrame is missing columns: {', '.join(missing)}")
        return _points_from_array(value[["x", "y"]].to_numpy(dtype=np.float64))

    if isinstance(value, np.ndarray):
        return _points_from_array(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if all(isinstance(item, Mapping) for item in value):
            return _points_from_mappings(value)
        return _points_from_array(np.asarray(value, dtype=object))

    raise PathDataError(f"unsupported path input type: {type(value)!r}")


def coerce_paths(values: Sequence[Any]) -> tuple[tuple[Point, ...], ...]:
    return tuple(coerce_path(value) for value in values)


def _load_structured(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    try:
        return json.loads(_BARE_KEY.sub(r'\1"\2"\3', text))
    except json.JSONDecodeError as exc:
        raise PathDataError(f"input parse error: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc


def _points_from_mappings(item: Any) -> tuple[Point, ...]:
    if not isinstance(item, Sequence) or isinstance(item, (str, bytes, bytearray)):
        raise PathDataError("path must be a list of points")
    out: list[Point] = []
    for i, raw in enumerate(item):
        if not isinstance(raw, Mapping):
            raise PathDataError(f"point {i} is not an object")
        out.append(Point(x=_coerce_coord(raw.get("x"), "x", i), y=_coerce_coord(raw.get("y"), "y", i)))
    return tuple(out)


def _coerce_coord(raw: Any, label: str, index: int) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, Decimal)):
        raise PathDataError(f"point {index} has non-numeric {label}: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise PathDataError(f"point {index} has non-finite {label}: {raw!r}")
    return value


def _points_from_array(arr: np.ndarray) -> tuple[Point, ...]:
    if arr.ndim != 2 or (arr.shape[0] > 0 and arr.shape[1] != 2):
        raise PathDataError(f"point array must have shape (N, 2), got {arr.shape}")
    if arr.dtype.kind not in {"i", "u", "f"}:
        try:
            arr = arr.astype(np.float64)
        except (TypeError, ValueError) as exc:
            raise PathDataError("point array contains non-numeric values") from exc
    values = arr.astype(np.float64, copy=False)
    if not np.all(np.isfinite(values)):
        raise PathDataError("point array contains non-finite values")
    return tuple(Point(x=float(x), y=float(y)) for x, y in values.tolist())
