from __future__ import annotations

import unittest

from pathview.model import PathEntry, Point
from pathview.picker import hit_test
from pathview.viewport import ViewportState


def _entry(path_id: str, points: list[tuple[float, float]], *, visible: bool = True, color: str = "blue") -> PathEntry:
    return PathEntry(id=path_id, points=tuple(Point(x, y) for x, y in points), color=color, visible=visible)


class HitTestTests(unittest.TestCase):
    def test_cursor_on_vertex_projection_returns_that_vertex(self) -> None:
        viewport = ViewportState(origin_x=100.0, origin_y=100.0, scale=2.0)
        entries = [_entry("path-0", [(0.0, 0.0), (10.0, 0.0)])]
        hit = hit_test(viewport.to_screen(Point(0.0, 0.0)), entries, viewport, threshold_px=8.0)
        self.assertIsNotNone(hit)
        assert hit is not None
        self.assertEqual((hit.path_id, hit.index, hit.x, hit.y), ("path-0", 0, 0.0, 0.0))
        self.assertEqual(hit.color, "blue")

        second = hit_test((120.0, 100.0), entries, viewport)
        assert second is not None
        self.assertEqual(second.index, 1)
        self.assertEqual((second.x, second.y), (10.0, 0.0))

    def test_far_cursor_returns_none(self) -> None:
        viewport = ViewportState(origin_x=0.0, origin_y=0.0, scale=1.0)
        entries = [_entry("path-0", [(0.0, 0.0), (10.0, 0.0)])]
        self.assertIsNone(hit_test((100.0, 100.0), entries, viewport, threshold_px=8.0))

    def test_threshold_is_strict(self) -> None:
        viewport = ViewportState(origin_x=0.0, origin_y=0.0, scale=1.0)
        entries = [_entry("path-0", [(0.0, 0.0)])]
        self.assertIsNone(hit_test((8.0, 0.0), entries, viewport, threshold_px=8.0))
        self.assertIsNotNone(hit_test((7.9, 0.0), entries, viewport, threshold_px=8.0))

    def test_later_path_wins_on_overlap(self) -> None:
        viewport = ViewportState(origin_x=0.0, origin_y=0.0, scale=1.0)
        entries = [
            _entry("path-0", [(5.0, 5.0)]),
            _entry("path-1", [(5.0, 5.0)], color="red"),
        ]
        hit = hit_test((5.0, -5.0), entries, viewport)
        assert hit is not None
        self.assertEqual(hit.path_id, "path-1")
        self.assertEqual(hit.color, "red")

    def test_hidden_paths_are_skipped(self) -> None:
        viewport = ViewportState(origin_x=0.0, origin_y=0.0, scale=1.0)
        entries = [
            _entry("path-0", [(5.0, 5.0)]),
            _entry("path-1", [(5.0, 5.0)], visible=False),
        ]
        hit = hit_test((5.0, -5.0), entries, viewport)
        assert hit is not None
        self.assertEqual(hit.path_id, "path-0")
        entries[0].visible = False
        self.assertIsNone(hit_test((5.0, -5.0), entries, viewport))

    def test_first_vertex_in_order_wins_over_nearer_one(self) -> None:
        viewport = ViewportState(origin_x=0.0, origin_y=0.0, scale=1.0)
        entries = [_entry("path-0", [(0.0, 0.0), (3.0, 0.0)])]
        hit = hit_test((2.5, 0.0), entries, viewport)
        assert hit is not None
        self.assertEqual(hit.index, 0)

    def test_empty_and_single_point_paths(self) -> None:
        viewport = ViewportState(origin_x=0.0, origin_y=0.0, scale=1.0)
        entries = [_entry("path-0", [(1.0, 1.0)]), _entry("path-1", [])]
        hit = hit_test((1.0, -1.0), entries, viewport)
        assert hit is not None
        self.assertEqual(hit.target, ("path-0", 0))


if __name__ == "__main__":
    unittest.main()
