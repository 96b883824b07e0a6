from __future__ import annotations

import unittest

from podcast_charts.events import InputEvent, parse_input_event
from podcast_charts.surface import InteractionLayer


class InputEventParsingTests(unittest.TestCase):
    def test_parse_wheel_payload(self) -> None:
        event = parse_input_event("wheel", {"x": "350", "y": 200, "delta_y": -120, "delta_mode": "line"})
        self.assertEqual(
            event,
            InputEvent(event_type="wheel", x=350.0, y=200.0, delta_y=-120.0, delta_mode="line"),
        )

    def test_positional_events_require_coordinates(self) -> None:
        self.assertIsNone(parse_input_event("pointer_down", {"x": 10}))
        self.assertIsNone(parse_input_event("wheel", {"x": "a", "y": 3, "delta_y": 1}))

    def test_leave_and_up_do_not_require_coordinates(self) -> None:
        leave = parse_input_event("pointer_leave", None)
        self.assertIsNotNone(leave)
        assert leave is not None
        self.assertFalse(leave.has_position)
        up = parse_input_event("pointer_up", {"button": 0})
        assert up is not None
        self.assertEqual(up.button, 0)

    def test_unknown_event_type_and_payload_ignored(self) -> None:
        self.assertIsNone(parse_input_event("key_down", {"key": "a"}))
        self.assertIsNone(parse_input_event("wheel", ["x", 1]))

    def test_non_finite_numbers_are_dropped(self) -> None:
        self.assertIsNone(parse_input_event("pointer_move", {"x": "inf", "y": 3}))
        event = parse_input_event("wheel", {"x": 1, "y": 2, "delta_y": float("nan")})
        assert event is not None
        self.assertIsNone(event.delta_y)

    def test_unknown_delta_mode_falls_back_to_pixel(self) -> None:
        event = parse_input_event("wheel", {"x": 1, "y": 2, "delta_y": 3, "delta_mode": "furlong"})
        assert event is not None
        self.assertEqual(event.delta_mode, "pixel")


class InteractionLayerTests(unittest.TestCase):
    def test_dispatch_in_registration_order(self) -> None:
        layer = InteractionLayer()
        calls: list[str] = []
        layer.add_listener("wheel", lambda e: calls.append("a"))
        layer.add_listener("wheel", lambda e: calls.append("b"))
        count = layer.dispatch(InputEvent(event_type="wheel", x=1, y=1, delta_y=1))
        self.assertEqual(count, 2)
        self.assertEqual(calls, ["a", "b"])

    def test_duplicate_registration_is_ignored(self) -> None:
        layer = InteractionLayer()
        calls: list[InputEvent] = []
        layer.add_listener("double_click", calls.append)
        layer.add_listener("double_click", calls.append)
        layer.dispatch(InputEvent(event_type="double_click"))
        self.assertEqual(len(calls), 1)
        layer.remove_listener("double_click", calls.append)
        layer.remove_listener("double_click", calls.append)
        self.assertEqual(layer.listener_count(), 0)

    def test_unsupported_event_type_rejected(self) -> None:
        layer = InteractionLayer()
        with self.assertRaises(ValueError):
            layer.add_listener("key_down", lambda e: None)


if __name__ == "__main__":
    unittest.main()
