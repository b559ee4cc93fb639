from __future__ import annotations

import unittest

from pathview import viewer
from pathview.commands import Clear, FillCircle, FillText, StrokePolyline
from pathview.model import CanvasSize, HoverResult, PathCollection, PathEntry, Point
from pathview.scene import IDLE_STATUS_TEXT, Frame, PathScene, SceneConfig, hover_status_text, render


SAMPLE_INPUT = """[[{x:10,y:10},{x:20,y:30},{x:30,y:10}],
[{x:-5,y:0},{x:5,y:-5},{x:0,y:-10}]]"""


def _polylines(frame: Frame) -> list[StrokePolyline]:
    return [c for c in frame.commands if isinstance(c, StrokePolyline)]


class PathCollectionTests(unittest.TestCase):
    def test_replace_assigns_ids_and_restarts_color_cycle(self) -> None:
        collection = PathCollection()
        first = collection.replace([[Point(0.0, 0.0)], [Point(1.0, 1.0)]])
        self.assertEqual([e.id for e in first], ["path-0", "path-1"])
        self.assertEqual([e.color for e in first], ["blue", "red"])
        second = collection.replace([[Point(0.0, 0.0)]])
        self.assertEqual([e.id for e in second], ["path-2"])
        self.assertEqual(second[0].color, "blue")
        self.assertEqual(len(collection), 1)

    def test_color_cycle_wraps(self) -> None:
        collection = PathCollection(colors=("a", "b"))
        entries = collection.replace([[], [], []])
        self.assertEqual([e.color for e in entries], ["a", "b", "a"])

    def test_flag_setters(self) -> None:
        collection = PathCollection()
        collection.replace([[Point(0.0, 0.0)]])
        self.assertTrue(collection.set_visible("path-0", False))
        self.assertTrue(collection.set_closed("path-0", True))
        entry = collection.get("path-0")
        assert entry is not None
        self.assertFalse(entry.visible)
        self.assertTrue(entry.closed)
        self.assertFalse(collection.set_visible("path-99", True))
        self.assertEqual(collection.visible_entries(), [])

    def test_entry_defaults(self) -> None:
        entry = PathCollection().replace([[Point(1.0, 2.0)]])[0]
        self.assertEqual(entry.thickness, 3.0)
        self.assertTrue(entry.visible)
        self.assertFalse(entry.closed)
        self.assertEqual(entry.number, "0")
        with self.assertRaises(ValueError):
            PathEntry(id="x", points=(), color="blue", thickness=0.0)


class RenderTests(unittest.TestCase):
    def _entries(self) -> tuple[PathEntry, ...]:
        collection = PathCollection()
        return collection.replace(
            [
                [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0)],
                [Point(-5.0, 0.0), Point(5.0, -5.0)],
            ]
        )

    def test_render_starts_with_clear_and_draws_visible_paths(self) -> None:
        commands = render(CanvasSize(width=300, height=200), self._entries(), show_labels=False)
        self.assertIsInstance(commands[0], Clear)
        self.assertEqual(len([c for c in commands if isinstance(c, StrokePolyline)]), 2)
        self.assertFalse(any(isinstance(c, FillCircle) for c in commands))

    def test_render_with_labels_draws_one_dot_per_vertex(self) -> None:
        commands = render(CanvasSize(width=300, height=200), self._entries(), show_labels=True)
        dots = [c for c in commands if isinstance(c, FillCircle)]
        self.assertEqual(len(dots), 5)
        path_labels = [c for c in commands if isinstance(c, FillText) and c.color in {"blue", "red"}]
        self.assertEqual([c.text for c in path_labels], ["1", "2", "3", "1", "2"])

    def test_hidden_entries_are_not_drawn(self) -> None:
        entries = self._entries()
        entries[1].visible = False
        commands = render(CanvasSize(width=300, height=200), entries, show_labels=False)
        polylines = [c for c in commands if isinstance(c, StrokePolyline)]
        self.assertEqual([c.color for c in polylines], ["blue"])

    def test_paths_stay_inside_padded_canvas(self) -> None:
        canvas = CanvasSize(width=300, height=200)
        commands = render(canvas, self._entries(), show_labels=False)
        for stroke in [c for c in commands if isinstance(c, StrokePolyline)]:
            for x, y in stroke.points:
                self.assertGreaterEqual(x, 0.1 * canvas.width - 1e-9)
                self.assertLessEqual(x, 0.9 * canvas.width + 1e-9)
                self.assertGreaterEqual(y, 0.1 * canvas.height - 1e-9)
                self.assertLessEqual(y, 0.9 * canvas.height + 1e-9)


class PathSceneTests(unittest.TestCase):
    def setUp(self) -> None:
        self.frames: list[Frame] = []
        self.scene = PathScene(CanvasSize(width=400, height=300), on_frame=self.frames.append)

    def test_initial_frame_is_drawn_once(self) -> None:
        self.assertEqual(self.scene.redraw_count, 1)
        self.assertEqual(len(self.frames), 1)
        self.assertIsInstance(self.scene.frame.commands[0], Clear)
        self.assertEqual(_polylines(self.scene.frame), [])

    def test_load_text_replaces_collection_and_redraws_once(self) -> None:
        result = self.scene.load_text(SAMPLE_INPUT)
        assert result is not None
        self.assertEqual(result.rejected, ())
        self.assertEqual([e.id for e in self.scene.collection], ["path-0", "path-1"])
        self.assertEqual(self.scene.redraw_count, 2)
        self.assertEqual(len(_polylines(self.scene.frame)), 2)

        self.scene.load_text(SAMPLE_INPUT)
        self.assertEqual([e.id for e in self.scene.collection], ["path-2", "path-3"])
        self.assertEqual([e.color for e in self.scene.collection], ["blue", "red"])
        self.assertEqual(self.scene.redraw_count, 3)

    def test_malformed_text_keeps_current_state(self) -> None:
        self.scene.load_text(SAMPLE_INPUT)
        with self.assertLogs("pathview.scene", level="ERROR"):
            self.assertIsNone(self.scene.load_text("[[{x:1,"))
        self.assertEqual(len(self.scene.collection), 2)
        self.assertEqual(self.scene.redraw_count, 2)

    def test_each_mutation_redraws_exactly_once(self) -> None:
        self.scene.load_text(SAMPLE_INPUT)
        count = self.scene.redraw_count
        self.assertTrue(self.scene.set_closed("path-0", True))
        self.assertEqual(self.scene.redraw_count, count + 1)
        self.assertTrue(_polylines(self.scene.frame)[0].closed)
        self.assertTrue(self.scene.set_visible("path-1", False))
        self.assertEqual(self.scene.redraw_count, count + 2)
        self.assertEqual(len(_polylines(self.scene.frame)), 1)
        self.scene.resize(800, 600)
        self.assertEqual(self.scene.redraw_count, count + 3)
        self.assertEqual(self.scene.frame.canvas, CanvasSize(width=800, height=600))
        self.scene.set_show_labels(True)
        self.assertEqual(self.scene.redraw_count, count + 4)
        self.assertTrue(any(isinstance(c, FillCircle) for c in self.scene.frame.commands))
        self.assertEqual(len(self.frames), self.scene.redraw_count)

    def test_unknown_ids_do_not_redraw(self) -> None:
        count = self.scene.redraw_count
        self.assertFalse(self.scene.set_visible("path-42", False))
        self.assertFalse(self.scene.set_closed("path-42", True))
        self.assertEqual(self.scene.redraw_count, count)

    def test_invalid_resize_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.scene.resize(0, 100)

    def test_frame_before_first_draw_raises(self) -> None:
        scene = PathScene.__new__(PathScene)
        scene._frame = None
        with self.assertRaises(RuntimeError):
            scene.frame

    def test_hover_redraws_only_on_target_change(self) -> None:
        self.scene.load_text(SAMPLE_INPUT)
        count = self.scene.redraw_count
        sx, sy = self.scene.viewport.to_screen(Point(10.0, 10.0))

        self.assertTrue(self.scene.pointer_move(sx, sy))
        self.assertEqual(self.scene.redraw_count, count + 1)
        hovered = self.scene.hovered
        assert hovered is not None
        self.assertEqual(hovered.target, ("path-0", 0))
        self.assertEqual(self.scene.status_text(), "Path: 0 | Index: 1 | Coord: (x: 10, y: 10)")

        self.assertFalse(self.scene.pointer_move(sx + 1.0, sy - 1.0))
        self.assertEqual(self.scene.redraw_count, count + 1)

        self.assertTrue(self.scene.pointer_move(-500.0, -500.0))
        self.assertIsNone(self.scene.hovered)
        self.assertEqual(self.scene.status_text(), IDLE_STATUS_TEXT)
        self.assertEqual(self.scene.redraw_count, count + 2)

        self.assertFalse(self.scene.pointer_move(-400.0, -400.0))
        self.assertEqual(self.scene.redraw_count, count + 2)

    def test_hover_moves_between_vertices_redraw(self) -> None:
        self.scene.load_text(SAMPLE_INPUT)
        a = self.scene.viewport.to_screen(Point(10.0, 10.0))
        b = self.scene.viewport.to_screen(Point(20.0, 30.0))
        self.assertTrue(self.scene.pointer_move(*a))
        self.assertTrue(self.scene.pointer_move(*b))
        hovered = self.scene.hovered
        assert hovered is not None
        self.assertEqual(hovered.index, 1)

    def test_reparse_clears_hover(self) -> None:
        self.scene.load_text(SAMPLE_INPUT)
        self.scene.pointer_move(*self.scene.viewport.to_screen(Point(10.0, 10.0)))
        self.scene.load_text(SAMPLE_INPUT)
        self.assertIsNone(self.scene.hovered)

    def test_custom_threshold(self) -> None:
        scene = PathScene(CanvasSize(width=400, height=300), config=SceneConfig(hit_threshold_px=1.0))
        scene.load_text(SAMPLE_INPUT)
        sx, sy = scene.viewport.to_screen(Point(10.0, 10.0))
        self.assertIsNone(scene.hit_test(sx + 2.0, sy))
        self.assertIsNotNone(scene.hit_test(sx + 0.5, sy))
        with self.assertRaises(ValueError):
            SceneConfig(hit_threshold_px=0.0)


class StatusTextTests(unittest.TestCase):
    def test_fractional_coordinates(self) -> None:
        text = hover_status_text(HoverResult(path_id="path-12", index=4, x=1.5, y=-0.25))
        self.assertEqual(text, "Path: 12 | Index: 5 | Coord: (x: 1.5, y: -0.25)")

    def test_idle(self) -> None:
        self.assertEqual(hover_status_text(None), IDLE_STATUS_TEXT)

    def test_caller_supplied_ids_match_entry_number(self) -> None:
        for path_id, expected in (("path-3", "3"), ("custom", "custom"), ("-5", "-5")):
            entry = PathEntry(id=path_id, points=(Point(0.0, 0.0),), color="blue")
            self.assertEqual(entry.number, expected)
            text = hover_status_text(HoverResult(path_id=path_id, index=0, x=0.0, y=0.0))
            self.assertTrue(text.startswith(f"Path: {expected} | "))


class ViewerFactoryTests(unittest.TestCase):
    def test_explicit_size(self) -> None:
        scene = viewer(320, 240, show_labels=True)
        self.assertEqual(scene.canvas, CanvasSize(width=320, height=240))
        self.assertTrue(scene.show_labels)


if __name__ == "__main__":
    unittest.main()
