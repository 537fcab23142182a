# liwengine

Building blocks for a small real-time game engine. They work without a
window or a graphics context: input state tracking, text output, debug
printing, mesh data, images, materials and a named asset registry.

## What is in it

- `liwengine.keycodes`: the `KeyboardKey` and `MouseButton` enumerations.
  Key values follow the Windows virtual-key numbering, and button values
  follow the GLFW button numbering. `MouseButton.LEFT`, `RIGHT` and `MIDDLE`
  are aliases of buttons 1 to 3.
- `liwengine.keyboard`: the `Device` base, with `sleep()` and `wake()`, and the
  abstract `InputDevice`, with `update_frame(dt)`. It also holds `KeyboardAction`
  and `Keyboard`. A `Keyboard` starts asleep and ignores key events until you call
  `wake()`. Feed it events with `on_update_key(key, action)` and call
  `update_frame(dt)` once per frame. You can then ask `key_down`, `key_held`,
  `key_triggered` (or `key_pressed`) and `key_released`. `sleep()` clears all state.
- `liwengine.mouse`: `MouseButtonAction` and `Mouse`. A `Mouse` also starts
  asleep. It tracks these:
  - button states, through `button_down`, `button_held`, `button_clicked` and `button_released`;
  - double clicks, through `double_clicked`: a second press within `click_limit`
    seconds, 0.2 by default;
  - `absolute_position` and `relative_position`. The relative position is the
    movement scaled by `sensitivity` (0.07 by default; `set_sensitivity(0)` sets it to 1.0);
  - vertical wheel movement, through `wheel_moved` and `wheel_movement`.

  Scroll events are applied even while the mouse is asleep.
- `liwengine.glfw_input`: translation tables and functions for GLFW codes:
  `to_key_code`, `to_key_action`, `to_mouse_code` and `to_mouse_button_action`.
  Each raises `KeyError` for a code it does not know, and GLFW repeat actions
  become `UNKNOWN`. The module also has `GlfwKeyboard` and `GlfwMouse`, which are
  awake from the start. Their `key_callback`, `button_callback`, `cursor_callback`
  and `scroll_callback` methods take the arguments of the matching GLFW
  callbacks, without the window handle.
- `liwengine.output`: `OutputDevice`, the abstract `TextOutputDevice` and
  `TextConsole`. `TextConsole` writes to a given stream, or to standard output by default.
- `liwengine.debug`: `Debug` writes plain lines, and lines prefixed with
  `[DEBUG INFO]` or `[ERROR INFO]`, to a text output device. The `DebugPrintTask`
  and `ErrorPrintTask` dataclasses print one line each when you call `execute()`.
- `liwengine.meshdata`: `PrimitiveType`, `SubMesh` and `MeshData`, which stores its
  attributes as numpy arrays. It offers:
  - `load_obj(path, flip_texcoord_v=True)`, which reads a Wavefront OBJ file.
    Polygons are split into triangle fans, each face corner becomes its own vertex,
    and each object or group becomes a submesh.
  - `unload()`.
  - `generate_normals()`.
  - `generate_tangents()`, which returns `False` when the mesh has no texcoords.
  - `triangle_count()` and `is_valid()`.
  - the `create_cube()` and `create_plane()` class methods.
- `liwengine.image`: `ImageFormat`, `channel_count(format)` and `Image`.
  `Image.load(path, format)` reads a file through Pillow into a
  height × width × channels `uint8` array. Only the 8-bit formats `R8`, `RG8`,
  `RGB8` and `RGBA8` can be loaded; other formats raise `ValueError`.
- `liwengine.material`: `MaterialParamType`, `MaterialParam` and `Material`.
  A `Material` holds a shader program object and named parameters of type
  int, float, integer vec4, float vec4 and 2D texture. Parameter names may be
  at most 31 characters long. `params(type)` returns the parameters of one type
  in the order they were added.
- `liwengine.assets`: `AssetType` and `AssetManager`. The manager works with
  `create`, `get`, `destroy` and `assets` (a read-only view), each keyed by type
  and name.
  - Images, mesh data and materials have default factories. Every other type
    needs a factory passed in `factories`.
  - Per-type limits may be set in `capacities`; creating beyond a limit raises `RuntimeError`.
  - `cleanup()` prints a warning for every asset that was never destroyed and
    returns their names grouped by type.

## What it does not do

The package opens no window and talks to no graphics API. There are no
textures, framebuffers, GPU meshes or compiled shaders here, and no built-in
asset factories for those types. It has no sphere primitive, and no loader for
mesh formats other than OBJ. It has no game loop, task scheduler or command-line
program. The task classes in `liwengine.debug` only run when their `execute()` is called.

## Installing

```
pip install .
```

Use `pip install ".[test]"` to install pytest as well.

## A taste

```python
from liwengine.keyboard import Keyboard, KeyboardAction
from liwengine.keycodes import KeyboardKey

keyboard = Keyboard()
keyboard.wake()
keyboard.on_update_key(KeyboardKey.A, KeyboardAction.PRESS)
assert keyboard.key_triggered(KeyboardKey.A)
keyboard.update_frame(0.016)
assert keyboard.key_held(KeyboardKey.A)
```

```python
from liwengine.meshdata import MeshData

cube = MeshData.create_cube()
print(cube.triangle_count())  # 12
```

```python
from liwengine.assets import AssetManager, AssetType

manager = AssetManager()
material = manager.create(AssetType.MATERIAL, "floor")
material.add_param_float("roughness", 0.5)
manager.destroy(AssetType.MATERIAL, "floor")
```

## Running the tests

```
pytest
```