# samplerdeck

Building blocks for a five-slot sampler. The package uses only the standard
library and contains these modules:

- **`samplerdeck.slots`**: sample slots A to E.
  - `SlotBank` holds five `SlotSample`s, one `SlotParameters` per slot, and
    a fallback sample for when no slot is loaded.
  - When audio is loaded, each channel goes through `preprocess_sample`. It
    subtracts the mean (DC removal), zeroes the first two samples, and fades
    in up to the next 256 along a quarter sine.
  - Slot indices outside 0–4 are ignored on writes. On reads they give an
    empty sample, a sample rate of 44100 Hz and default parameters.
- **`samplerdeck.smoother`**: `LinearSmoother` ramps a value to a target in
  equal per-sample steps, to avoid zipper noise.
- **`samplerdeck.encoder`**: `EndlessEncoder` is an endless rotary encoder
  backed by a 0–100 slider.
  - The slider recentres at its ends.
  - The encoder keeps a continuous rotation angle.
  - It has callbacks for value changes, the centre button and drag gestures.
  - `center_hit` tests whether a point falls in the round centre button.
- **`samplerdeck.keyboard`**: `key_to_note` maps computer keys to MIDI notes.
  Keys `A`–`K` play from C4 with black keys on `W E T Y U`. Keys
  `Z X C V B N M , . /` are a lower row of white keys. `KeyboardState` tracks
  held notes and sends note-on/note-off through a callback.
- **`samplerdeck.instrument_menu`**: `InstrumentMenu` is the instrument list.
  It defaults to `"Sampler"` and `"JNO"`. It tracks the selection and can
  compute the rectangle of each entry.
- **`samplerdeck.fade`**: `ParameterFade` keeps the parameter readout fully
  opaque after a change. Once more than a second has passed, each `tick`
  lowers it by 0.1.
- **`samplerdeck.layout`**: editor layout and the sample-name label.
  - `compute_layout` returns an `EditorLayout` with the bounds (`Rect`) of
    every control for a given window size.
  - `slot_label` and `truncate_label` build and fit the sample-name label.

## Install

```
pip install .
```

## Examples

Load samples into slots:

```python
from samplerdeck.slots import SlotBank, preprocess_sample

bank = SlotBank()
bank.set_sample(0, [[0.0, 0.5, 1.0, 0.5] * 100], 44100.0)   # mono
bank.set_sample(2, [[0.2, -0.2] * 200, [0.1, -0.1] * 200], 48000.0)  # stereo

bank.loaded_slots()          # [0, 2]
bank.sample(2).is_stereo     # True
bank.sample_rate(2)          # 48000.0

params = bank.parameters(0)  # live, mutable settings for slot A
params.set_adsr(10.0, 200.0, 0.8, 500.0)
params.loop_enabled = True
params.set_loop_points(100, 300)

preprocess_sample([1.0, 1.0, 1.0])[:2]   # [0.0, 0.0]
```

Smooth a parameter change:

```python
from samplerdeck.smoother import LinearSmoother

s = LinearSmoother()
s.set_target(1.0, 4)
s.next_value()     # 0.25
s.is_smoothing     # True
```

Turn an encoder and play the keyboard:

```python
from samplerdeck.encoder import EndlessEncoder
from samplerdeck.keyboard import KeyboardState

enc = EndlessEncoder("pitch")
enc.on_value_changed = lambda v: print("value", v)
with enc.drag():
    enc.move_to(60.0)          # prints "value 0.6"

keys = KeyboardState(send=lambda note, vel, on: print(note, vel, on))
keys.press("a")                # 60 1.0 True
keys.release_up([])            # 60 0.0 False, returns [60]
```

Lay out the editor and fit a label:

```python
from samplerdeck.layout import compute_layout, sample_name_width, slot_label, truncate_label

layout = compute_layout(1000, 600)
width = sample_name_width(layout.screen)
text = truncate_label(slot_label(1, "very_long_sample_name.wav"), 20, measure=len)
```

## What it does not do

The package does not read audio files and does not render audio. It has no
voice engine and no MIDI routing to slots. It does not draw anything on
screen. `SlotBank`, the encoder, keyboard, menu, fade and layout classes hold
state and compute values. Connecting them to an audio device, a MIDI input or
a GUI toolkit is left to the application.

## Tests

```
pip install .[test]
pytest
```