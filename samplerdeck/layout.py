"""Placement of the editor's controls and fitting of the sample name label."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

GAIN_AREA = 150
LEFT_CONTROLS_WIDTH = 100
SHIFT_BUTTON_WIDTH = 80
MENU_ENCODER_SIZE = 60
SCREEN_WIDTH = 400
SCREEN_HEIGHT_FRACTION = 0.6
PILL_WIDTH = 80
PILL_HEIGHT = 20
PILL_SPACING = 5
BPM_OFFSET = 100
BPM_WIDTH = 90
LABEL_HEIGHT = 20
PARAM_DISPLAY_HEIGHT = 40
PARAM_DISPLAY_SPACING = 5
PARAM_GROUP_PADDING = 5
PARAM_BOTTOM_PADDING = 5
ENCODER_SIZE = 70
ENCODER_SPACING = 8
ROW_SPACING = 15
RIGHT_MARGIN = 20
BUTTON_SPACING = 8
BUTTON_COUNT = 5
MIDI_STATUS_HEIGHT = 25
ELLIPSIS = "..."


def _idiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _clamp(amount: int, limit: int) -> int:
    return max(0, min(amount, limit))


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; splitting returns new rectangles instead of mutating."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def reduced(self, dx: int, dy: Optional[int] = None) -> Rect:
        """Shrink by ``dx`` on left and right and ``dy`` (default ``dx``) on top and bottom."""
        if dy is None:
            dy = dx
        return Rect(
            self.x + dx,
            self.y + dy,
            max(0, self.width - 2 * dx),
            max(0, self.height - 2 * dy),
        )

    def split_left(self, amount: int) -> tuple[Rect, Rect]:
        """Return the left ``amount`` pixels and what remains to their right."""
        cut = _clamp(amount, self.width)
        return (
            Rect(self.x, self.y, cut, self.height),
            Rect(self.x + cut, self.y, self.width - cut, self.height),
        )

    def split_top(self, amount: int) -> tuple[Rect, Rect]:
        """Return the top ``amount`` pixels and what remains below them."""
        cut = _clamp(amount, self.height)
        return (
            Rect(self.x, self.y, self.width, cut),
            Rect(self.x, self.y + cut, self.width, self.height - cut),
        )

    def split_bottom(self, amount: int) -> tuple[Rect, Rect]:
        """Return the bottom ``amount`` pixels and what remains above them."""
        cut = _clamp(amount, self.height)
        return (
            Rect(self.x, self.bottom - cut, self.width, cut),
            Rect(self.x, self.y, self.width, self.height - cut),
        )


@dataclass(frozen=True)
class EditorLayout:
    """Bounds of every control in the editor window."""

    gain_slider: Rect
    volume_label: Rect
    shift_button: Rect
    menu_encoder: Rect
    screen: Rect
    adsr_pill: Rect
    sample_name_label: Rect
    param_displays: tuple[Rect, ...]
    adsr_label: Rect
    parameter_display_label: Rect
    bpm_display_label: Rect
    encoders: tuple[Rect, ...]
    square_buttons: tuple[Rect, ...]
    midi_status: Rect


def _pill_x(screen: Rect) -> int:
    bpm_left = screen.x + screen.width - BPM_OFFSET
    return bpm_left - PILL_WIDTH - PILL_SPACING


def sample_name_width(screen: Rect) -> int:
    """Width left for the sample name between the screen's left edge and the ADSR pill."""
    return (_pill_x(screen) - 5) - (screen.x + 10)


def slot_label(slot: int, name: str) -> str:
    """Label text for a slot: its letter (A-E for 0-4), a colon and the name."""
    return f"{chr(ord('A') + slot)}: {name}"


def truncate_label(text: str, max_width: float, measure: Callable[[str], float]) -> str:
    """Shorten ``text`` with a trailing ellipsis until ``measure`` fits ``max_width``."""
    if measure(text) <= max_width:
        return text
    truncated = text
    while truncated and measure(truncated + ELLIPSIS) > max_width:
        truncated = truncated[:-1]
    return truncated + ELLIPSIS


def _row(start_x: int, y: int, width: int, height: int, spacing: int, count: int) -> tuple[Rect, ...]:
    return tuple(
        Rect(start_x + (width + spacing) * index, y, width, height) for index in range(count)
    )


def compute_layout(width: int, height: int) -> EditorLayout:
    """Lay out the editor for a window of ``width`` by ``height`` pixels."""
    window = Rect(0, 0, width, height)
    bounds = window

    left_column, bounds = bounds.split_left(GAIN_AREA)
    top_left = left_column.split_top(GAIN_AREA)[0].reduced(10)
    gain_area, volume_area = top_left.split_top(120)
    gain_slider = gain_area.reduced(10)
    volume_label = volume_area.reduced(5)

    left_controls, bounds = bounds.split_left(LEFT_CONTROLS_WIDTH)
    left_controls = left_controls.reduced(10)
    shift_area = left_controls.split_top(50)[0]
    shift_button = shift_area.split_left(SHIFT_BUTTON_WIDTH)[0].reduced(5)

    menu_encoder = Rect(bounds.x + 5, bounds.y + 20, MENU_ENCODER_SIZE, MENU_ENCODER_SIZE)
    bounds = bounds.split_left(MENU_ENCODER_SIZE + 10)[1]

    screen_area, bounds = bounds.split_left(SCREEN_WIDTH)
    screen_bounds = screen_area.split_top(int(screen_area.height * SCREEN_HEIGHT_FRACTION))[0]
    screen = screen_bounds.reduced(10)

    pill_x = _pill_x(screen)
    adsr_pill = Rect(pill_x, screen.y + 5, PILL_WIDTH, PILL_HEIGHT)

    name_left = screen.x + 10
    sample_name_label = Rect(name_left, screen.y + 5, sample_name_width(screen), LABEL_HEIGHT)

    available = screen.width - PARAM_GROUP_PADDING * 2
    display_width = _idiv(available - PARAM_DISPLAY_SPACING * 3, 4)
    param_x = screen.x + PARAM_GROUP_PADDING
    bottom_row_y = screen.bottom - PARAM_BOTTOM_PADDING - PARAM_DISPLAY_HEIGHT
    top_row_y = bottom_row_y - PARAM_DISPLAY_HEIGHT - PARAM_DISPLAY_SPACING - 15 + 15
    param_displays = _row(
        param_x, top_row_y, display_width, PARAM_DISPLAY_HEIGHT, PARAM_DISPLAY_SPACING, 4
    ) + _row(param_x, bottom_row_y, display_width, PARAM_DISPLAY_HEIGHT, PARAM_DISPLAY_SPACING, 4)

    adsr_label = Rect(screen.x + screen.width - 60, screen.y + 5, 50, LABEL_HEIGHT)
    parameter_display_label = Rect(screen.x + 10, screen.y + 5, 100, LABEL_HEIGHT)
    bpm_display_label = Rect(
        screen.x + screen.width - BPM_OFFSET, screen.y + 5, BPM_WIDTH, LABEL_HEIGHT
    )

    encoder_size = ENCODER_SIZE
    total_width = encoder_size * 4 + ENCODER_SPACING * 3
    encoder_x = screen.right + 5
    max_available = width - encoder_x - RIGHT_MARGIN
    if total_width > max_available:
        encoder_size = _idiv(max_available - ENCODER_SPACING * 3, 4)
        total_width = encoder_size * 4 + ENCODER_SPACING * 3

    half = _idiv(encoder_size, 2)
    top_centre = screen.y + half
    bottom_centre = top_centre + encoder_size + ROW_SPACING
    encoders = _row(
        encoder_x, top_centre - half, encoder_size, encoder_size, ENCODER_SPACING, 4
    ) + _row(encoder_x, bottom_centre - half, encoder_size, encoder_size, ENCODER_SPACING, 4)

    button_size = _idiv(total_width - BUTTON_SPACING * (BUTTON_COUNT - 1), BUTTON_COUNT)
    button_y = bottom_centre + half + ROW_SPACING
    square_buttons = _row(
        encoder_x, button_y, button_size, button_size, BUTTON_SPACING, BUTTON_COUNT
    )

    midi_status = window.split_bottom(MIDI_STATUS_HEIGHT)[0]

    return EditorLayout(
        gain_slider=gain_slider,
        volume_label=volume_label,
        shift_button=shift_button,
        menu_encoder=menu_encoder,
        screen=screen,
        adsr_pill=adsr_pill,
        sample_name_label=sample_name_label,
        param_displays=param_displays,
        adsr_label=adsr_label,
        parameter_display_label=parameter_display_label,
        bpm_display_label=bpm_display_label,
        encoders=encoders,
        square_buttons=square_buttons,
        midi_status=midi_status,
    )