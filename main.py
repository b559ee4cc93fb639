from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from pathview.commands import replay
from pathview.errors import PathDataError
from pathview.model import CanvasSize
from pathview.raster import RasterSurface
from pathview.scene import PathScene, SceneConfig


LOGGER = logging.getLogger("pathview")

HEADLESS_DEFAULT_SIZE = (960, 720)
ASPECT = 4.0 / 3.0


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="pathview")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a path list file to PNG.")
    render.add_argument("input", type=Path, help="JSON or object-literal list of paths.")
    render.add_argument("--out", type=Path, required=True)
    _add_canvas_args(render)
    render.add_argument("--labels", action="store_true", help="Draw vertex dots and sequence numbers.")
    render.add_argument("--closed", nargs="*", default=[], metavar="PATH_ID", help="Close these paths (e.g. path-0).")
    render.add_argument("--hide", nargs="*", default=[], metavar="PATH_ID", help="Hide these paths.")

    pick = sub.add_parser("pick", help="Report the vertex under a cursor position.")
    pick.add_argument("input", type=Path)
    pick.add_argument("x", type=float)
    pick.add_argument("y", type=float)
    _add_canvas_args(pick)
    pick.add_argument("--threshold", type=float, default=8.0, help="Hit radius in pixels.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    width, height = _resolve_dimensions(args.width, args.height)

    if args.command == "render":
        scene = _load_scene(args.input, width, height, SceneConfig())
        for path_id in args.closed:
            if not scene.set_closed(path_id, True):
                LOGGER.warning("unknown path id for --closed: %s", path_id)
        for path_id in args.hide:
            if not scene.set_visible(path_id, False):
                LOGGER.warning("unknown path id for --hide: %s", path_id)
        scene.set_show_labels(args.labels)
        surface = RasterSurface(width, height)
        replay(scene.frame.commands, surface)
        out = surface.save_png(args.out)
        print(f"wrote {out} ({width}x{height}, paths={len(scene.collection)}, commands={len(scene.frame.commands)})")
        return

    if args.command == "pick":
        scene = _load_scene(args.input, width, height, SceneConfig(hit_threshold_px=args.threshold))
        scene.pointer_move(args.x, args.y)
        print(scene.status_text())
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _add_canvas_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=None, help="Canvas width in pixels. Default: 960.")
    parser.add_argument("--height", type=int, default=None, help="Canvas height in pixels. Default: 720.")


def _load_scene(path: Path, width: int, height: int, config: SceneConfig) -> PathScene:
    scene = PathScene(CanvasSize(width=width, height=height), config=config)
    text = path.read_text(encoding="utf-8")
    if scene.load_text(text) is None:
        raise PathDataError(f"could not parse path input from {path}")
    return scene


def _resolve_dimensions(width: int | None, height: int | None) -> tuple[int, int]:
    if width is not None and width <= 0:
        raise ValueError("width must be > 0")
    if height is not None and height <= 0:
        raise ValueError("height must be > 0")
    if width is not None and height is not None:
        return width, height
    if width is not None:
        return width, max(1, int(round(width / ASPECT)))
    if height is not None:
        return max(1, int(round(height * ASPECT))), height
    return HEADLESS_DEFAULT_SIZE


if __name__ == "__main__":
    main()
