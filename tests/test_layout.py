import pytest

from samplerdeck.layout import (
    Rect,
    compute_layout,
    sample_name_width,
    slot_label,
    truncate_label,
)

WIDE = (1400, 600)
NARROW = (1000, 600)


def test_rect_edges():
    r = Rect(3, 4, 10, 20)
    assert r.right == 13
    assert r.bottom == 24


def test_reduced_shrinks_symmetrically():
    r = Rect(0, 0, 100, 50)
    out = r.reduced(10)
    assert out.x == r.x + 10 and out.y == r.y + 10
    assert out.width == r.width - 20 and out.height == r.height - 20
    two = r.reduced(5, 2)
    assert two.width == r.width - 10 and two.height == r.height - 4


def test_reduced_clamps_to_zero():
    out = Rect(0, 0, 4, 4).reduced(10)
    assert out.width == 0 and out.height == 0


@pytest.mark.parametrize("amount", [0, 30, 100, 250, -5])
def test_split_left_pieces_cover_original(amount):
    r = Rect(10, 20, 100, 40)
    taken, rest = r.split_left(amount)
    assert taken.x == r.x
    assert taken.right == rest.x
    assert taken.width + rest.width == r.width
    assert 0 <= taken.width <= r.width


@pytest.mark.parametrize("amount", [0, 15, 40, 99])
def test_split_top_and_bottom(amount):
    r = Rect(0, 10, 50, 40)
    top, below = r.split_top(amount)
    assert top.bottom == below.y
    assert top.height + below.height == r.height
    bottom, above = r.split_bottom(amount)
    assert bottom.bottom == r.bottom
    assert above.bottom == bottom.y
    assert above.height + bottom.height == r.height


def test_fixed_sizes_from_source():
    layout = compute_layout(*WIDE)
    assert (layout.adsr_pill.width, layout.adsr_pill.height) == (80, 20)
    assert (layout.menu_encoder.width, layout.menu_encoder.height) == (60, 60)
    assert layout.midi_status.height == 25
    assert layout.bpm_display_label.width == 90


def test_midi_status_spans_bottom():
    width, height = WIDE
    layout = compute_layout(width, height)
    assert layout.midi_status.width == width
    assert layout.midi_status.bottom == height


def test_header_row_is_packed_without_overlap():
    layout = compute_layout(*WIDE)
    assert layout.sample_name_label.right + 5 == layout.adsr_pill.x
    assert layout.adsr_pill.right + 5 == layout.bpm_display_label.x
    assert layout.bpm_display_label.x == layout.screen.right - 100


def test_sample_name_width_matches_label():
    layout = compute_layout(*WIDE)
    assert sample_name_width(layout.screen) == layout.sample_name_label.width


def test_param_displays_two_rows_of_four():
    layout = compute_layout(*WIDE)
    top, bottom = layout.param_displays[:4], layout.param_displays[4:]
    assert len({r.y for r in top}) == 1 and len({r.y for r in bottom}) == 1
    assert [r.x for r in top] == [r.x for r in bottom]
    assert bottom[0].bottom == layout.screen.bottom - 5
    assert all(a.right + 5 == b.x for a, b in zip(top, top[1:]))
    assert top[-1].right <= layout.screen.right


def test_encoders_full_size_when_room():
    layout = compute_layout(*WIDE)
    assert all(r.width == 70 and r.height == 70 for r in layout.encoders)
    assert layout.encoders[0].x == layout.screen.right + 5
    assert layout.encoders[0].y == layout.screen.y
    assert layout.encoders[4].y == layout.encoders[0].bottom + 15


def test_encoders_shrink_to_fit_narrow_window():
    width, height = NARROW
    layout = compute_layout(width, height)
    size = layout.encoders[0].width
    assert size < 70
    assert layout.encoders[3].right <= width - 20


def test_square_buttons_span_encoder_rows():
    layout = compute_layout(*WIDE)
    buttons = layout.square_buttons
    assert len(buttons) == 5
    assert buttons[0].x == layout.encoders[0].x
    assert all(a.right + 8 == b.x for a, b in zip(buttons, buttons[1:]))
    assert buttons[-1].right <= layout.encoders[3].right
    assert buttons[0].y == layout.encoders[4].bottom + 15


def test_slot_label_letters():
    assert slot_label(0, "kick.wav") == "A: kick.wav"
    assert slot_label(4, "snare.wav").startswith("E: ")


def test_truncate_label_keeps_fitting_text():
    assert truncate_label("short", 100, len) == "short"


def test_truncate_label_shortens_with_ellipsis():
    out = truncate_label("abcdefgh", 5, len)
    assert out.endswith("...")
    assert len(out) <= 5
    assert "abcdefgh".startswith(out[:-3])
    assert out == "ab..."


def test_truncate_label_can_empty_the_text():
    assert truncate_label("abcdef", 1, len) == "..."