# almondshell

Engine pieces for small games, in plain Python with no third-party
dependencies.

## What is inside

- `almondshell.events` – `EventType`, `Event`, an `EventSystem` that queues
  posted events and hands them to registered callbacks on `poll_events()`,
  `event_type_to_string` / `string_to_event_type`, and `MovementEvent`.
- `almondshell.input` – `InputSystem` tracking keyboard keys, `MouseButton`
  and `GamepadButton` states; `update()` turns pressed inputs into held ones.
- `almondshell.components` – `PositionComponent`, `VelocityComponent` and a
  `ComponentManager` storing one component of each type per entity
  (`ComponentNotFoundError` when missing).
- `almondshell.ecs` – `EntityComponentSystem` with sequential entity ids;
  `get_component` returns `None` for an unknown entity or component.
- `almondshell.scene` – `Scene` holding entities, applying movement events,
  looking entities up by id and cloning; `SceneSnapshot` pairs a scene with a
  time stamp.
- `almondshell.savegame` – `save_game` / `load_game` write and read lists of
  events as zlib-compressed text; `compress_data` / `decompress_data`.
- `almondshell.image_loader` – `load_image` / `load_bmp` read 24- and 32-bit
  BMP files into `ImageData` with four channels per pixel, rows top to bottom.
- `almondshell.atlas_packer` – `TexturePacker`, a binary-tree rectangle packer
  raising `AtlasFullError` when a rectangle does not fit.
- `almondshell.texture_atlas` – `TextureAtlas`, which places images at the
  first free spot, doubles its size up to a maximum when full, and returns
  regions and UVs.
- `almondshell.sprite_bank` – `SpriteBank` of named `Sprite` entries.
- `almondshell.glyph_atlas` – `GlyphAtlas`, laying glyph bitmaps out in rows
  and giving each `Glyph` its texture coordinates.
- `almondshell.ring_queue` – `WaitFreeQueue`, a fixed-capacity ring queue
  raising `QueueFullError` / `QueueEmptyError`.
- `almondshell.packed` – `PackedRecord` and `unpack_record` for an 18-byte
  packed little-endian record.
- `almondshell.robust_time` – `RobustTime`, a clock that moves only when told
  to, with `Timer` and alarms.
- `almondshell.ui` – `UIButton` reacting to mouse events and `UIManager`
  feeding it polled events.
- `almondshell.plugin` – the `Plugin` base class and the `plugin_session`
  context manager.
- `almondshell.context` – `register_context`, `create_context_funcs` and
  `run_context` for named init/process/cleanup sets.
- `almondshell.geometry` – `Mesh` and `Quad` vertex/index data.
- `almondshell.shader_source` – `read_shader_source` and
  `load_shader_sources`.
- `almondshell.brush` – `brush_cells`, `normalize_position` and `BrushInput`
  for painting on a grid with the mouse.
- `almondshell.platform_utils` – `is_console_application`,
  `find_resource_dir` and `search_and_set_resource_dir`.
- `almondshell.fps` – `FPSCounter` and `run_fps_counter`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Packing rectangles into an atlas:

```python
from almondshell.atlas_packer import TexturePacker, AtlasFullError

packer = TexturePacker(256, 256)
print(packer.insert(64, 64))   # (0, 0)
try:
    packer.insert(512, 512)
except AtlasFullError as exc:
    print(exc)
```

Tracking input:

```python
from almondshell.input import InputSystem

inputs = InputSystem()
inputs.key_pressed(65)
print(inputs.is_key_pressed(65))  # True
inputs.update()
print(inputs.is_key_held(65))     # True
inputs.key_released(65)
```

A bounded queue:

```python
from almondshell.ring_queue import WaitFreeQueue

queue = WaitFreeQueue(4)
queue.enqueue("load-assets")
print(queue.dequeue())   # load-assets
print(queue.is_empty())  # True
```

Wide text to UTF-8:

```python
from almondshell.string_utils import convert_to_utf8

print(convert_to_utf8("é"))  # b'\xc3\xa9'
```

## Command line

```
almondshell-fps
```

Starts one thread per available CPU, each updating a shared frame counter
once and printing its frames-per-second reading.

## What it does not do

There is no window, renderer or game loop. The atlas, glyph, mesh, quad and
shader modules only compute layouts and hold data or source text; nothing is
drawn or sent to a graphics device. Glyph metrics must be supplied by the
caller, since no font is rasterised. Only BMP images can be loaded; PNG files
raise `ImageFormatError`. Plugins are a base class and a session helper:
nothing loads them from files.