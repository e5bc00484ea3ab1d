import math

from samplerdeck.encoder import EndlessEncoder, center_hit


def test_initial_value_is_centre():
    assert EndlessEncoder("e").value() == 0.5


def test_set_value_does_not_notify():
    enc = EndlessEncoder()
    calls = []
    enc.on_value_changed = calls.append
    enc.set_value(0.25)
    assert enc.value() == 0.25
    assert calls == []


def test_set_value_clamps():
    enc = EndlessEncoder()
    enc.set_value(2.0)
    assert enc.value() == 1.0
    enc.set_value(-1.0)
    assert enc.value() == 0.0


def test_move_notifies_normalized_value():
    enc = EndlessEncoder()
    calls = []
    enc.on_value_changed = calls.append
    result = enc.move_to(60.0)
    assert calls == [result]
    assert result == 0.6
    assert enc.value() == 0.6


def test_move_forward_then_back_returns_angle():
    enc = EndlessEncoder()
    enc.move_to(70.0)
    assert enc.rotation_angle > 0.0
    enc.move_to(50.0)
    assert abs(enc.rotation_angle) < 1e-9


def test_top_end_recentres_slider():
    enc = EndlessEncoder()
    calls = []
    enc.on_value_changed = calls.append
    enc.move_to(100.0)
    assert calls == [1.0]
    assert enc.value() == 0.5


def test_bottom_end_recentres_slider():
    enc = EndlessEncoder()
    enc.move_to(0.0)
    assert enc.value() == 0.5
    assert enc.rotation_angle < 0.0


def test_out_of_range_move_is_clamped():
    enc = EndlessEncoder()
    assert enc.move_to(150.0) == 1.0
    assert enc.value() == 0.5


def test_large_jump_counts_as_wrap():
    enc = EndlessEncoder()
    enc.move_to(5.0)
    before = enc.rotation_angle
    enc.move_to(95.0)
    assert enc.rotation_angle < before


def test_display_angle_in_range_for_negative_rotation():
    enc = EndlessEncoder()
    enc.move_to(20.0)
    assert enc.rotation_angle < 0.0
    angle = enc.display_angle()
    assert 0.0 <= angle < 2 * math.pi
    assert math.isclose(angle, enc.rotation_angle + 2 * math.pi)


def test_rotation_is_kept_bounded():
    enc = EndlessEncoder()
    for _ in range(150):
        for position in (80.0, 10.0, 40.0, 70.0):
            enc.move_to(position)
    assert abs(enc.rotation_angle) <= 2 * math.pi * 101
    assert 0.0 <= enc.display_angle() < 2 * math.pi


def test_press_runs_handler():
    enc = EndlessEncoder()
    pressed = []
    assert enc.press() is False
    enc.on_button_pressed = lambda: pressed.append(True)
    assert enc.press() is True
    assert pressed == [True]


def test_drag_calls_start_and_end():
    enc = EndlessEncoder()
    log = []
    enc.on_drag_start = lambda: log.append("start")
    enc.on_drag_end = lambda: log.append("end")
    with enc.drag():
        enc.move_to(55.0)
        log.append("move")
    assert log == ["start", "move", "end"]


def test_center_hit():
    assert center_hit(10, 10, 20) is True
    assert center_hit(20, 10, 20) is True
    assert center_hit(0, 10, 20) is True
    assert center_hit(0, 0, 20) is False
    assert center_hit(19, 19, 20) is False