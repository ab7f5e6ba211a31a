# lierokit

Building blocks for the Liero worm game, in pure Python with no third-party
dependencies.

## Modules

- `lierokit.rand`: `Rand`, the game's deterministic 32-bit LCG. `next()` returns
  the raw state, `below(n)` a value in `[0, n)`, `between(a, b)` a value in
  `[a, b)`; calling the object with 0, 1 or 2 arguments does the same.
- `lierokit.binio`: little-endian integer readers and writers
  (`read_uint8`, `read_sint16`, `read_sint32`, `write_uint16`, ...) and Pascal
  strings (`read_pascal_string`, `read_pascal_field`, `write_pascal_string`,
  `read_pascal_string_at`). Short reads raise `EOFError`.
- `lierokit.filesystem`: path helpers (`change_leaf`, `get_root`,
  `get_basename`, `get_extension`, `join_path`), `get_home` (creates
  `$HOME/.liero`), `file_exists`, `file_length`, `iter_directory`, and
  `tolerant_open`, which retries a name in upper case, lower case and
  capitalised before raising `FileNotFoundError`.
- `lierokit.fixedmath`: 16.16 fixed point (`itof`, `ftoi`), `vector_length`,
  `distance_to`, and `load_tables`, which reads 128 interleaved cosine/sine
  pairs into a `TrigTables`.
- `lierokit.datafiles`: `DataFiles` knows the data root and the paths of
  `liero.chr`, `liero.snd` and `liero.opt`, keeps opened files cached, closes
  those idle for more than 5 seconds in `process()`, and closes everything in
  `close_all()` or on leaving a `with` block.
- `lierokit.constants`: the `Const`, `Text` and `Hack` enums and
  `load_constants()`, which returns a `Constants` object indexed by any of them.
- `lierokit.keys`: the `Key` enum of SDL key symbols, `dos_to_sdl_key` and
  `sdl_to_dos_key` (unmapped keys give scan code 89).
- `lierokit.console`: `Console` writes start-up text to a stream, tracks colour
  attributes, and offers `write_warning` and the `local_attributes` context
  manager.
- `lierokit.blit`: `Surface` (a bytearray of palette indices with a
  `ClipRect`), clipped image blits (`blit_image`, `blit_image_no_key_colour`,
  `blit_image_r`, `blit_fire_cone`), `draw_bar`, `draw_rounded_box`, and
  Bresenham lines (`line_points`, `draw_line`, `draw_ninjarope`,
  `draw_laser_sight`).
- `lierokit.font`: `Font` of 250 7x8 `Glyph`s, built with `Font.from_bytes` or
  `Font.load`, with `draw_char`, `draw_text` and `get_width`.
- `lierokit.menu`: `Menu` and `MenuItem`; `Menu.read_items` reads fixed-size
  Pascal records, `Menu.draw` draws them on a surface with a font.
- `lierokit.settings`: `Settings`, `WormSettings`, `GameMode` and
  `generate_name`. `Settings.save` writes the 155-byte settings file;
  `Settings.load` reads it back, raising `SettingsError` if the file is too
  short, and fills empty worm names from a names file when one is given.
- `lierokit.sound`: `read_sounds` parses a sound bank into `Sound` objects
  (16-bit samples, also available as PCM bytes); `ChannelTable` records which
  sound id occupies which channel.
- `lierokit.level`: `Level`, a grid of palette indices with bounds-checked
  access; `Level.load` reads a 504x350 level and returns the palette bytes that
  follow a `POWERLEVEL` marker, or `None`.

## Installing

```
pip install .
```

## Example

```python
from lierokit.rand import Rand
from lierokit.settings import Settings

rng = Rand(1234)
print(rng.below(100))

settings = Settings()
settings.save("liero.dat")

loaded = Settings()
loaded.load("liero.dat", "names.dat", rng)
print(loaded.lives, loaded.blood)
```

## What this package does not do

There is no game: no command to run, no game loop, worms, weapons or physics,
and no window. Drawing goes into in-memory `Surface` objects only, and
`ChannelTable` only keeps track of channels; nothing is shown on screen or
played through a sound device.

## Running the tests

```
pip install .[test]
pytest
```