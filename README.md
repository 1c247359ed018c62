# razel

The core of a small layered 2D rendering engine. It decides *what* gets
drawn and *when*. It does not own a window or a graphics driver. The drawing
itself goes to a back end that you supply.

## Modules

- `razel.timestep`: `Timestep` holds a frame's duration. It has `seconds`
  and `milliseconds` properties. `float()` and multiplication by a number
  both work on it.
- `razel.codes`: the `Key` and `MouseButton` integer enums, for example
  `Key.W` and `MouseButton.LEFT`.
- `razel.events`: the `Event` base class and its concrete events:
  - `WindowResizeEvent`, `WindowCloseEvent`, `AppTickEvent`,
    `AppUpdateEvent` and `AppRenderEvent`.
  - `KeyPressedEvent`, `KeyReleasedEvent` and `KeyTypedEvent`.
  - `MouseMovedEvent`, `MouseScrolledEvent`, `MouseButtonPressedEvent` and
    `MouseButtonReleasedEvent`.

  Every event has an `EventType`, a set of `EventCategory` flags, a
  `handled` flag and `is_in_category()`. `EventDispatcher.dispatch(cls, func)`
  calls `func` only when the event has exactly that type, and stores the
  handler's result in `event.handled`.
- `razel.layers`: `Layer` and `LayerStack`.
  - `Layer` provides the hooks `on_attach`, `on_detach`, `on_update`,
    `on_event` and `on_imgui_render`. The default hooks only keep counters:
    `attached`, `elapsed`, `events_seen` and `ui_frames`.
  - `LayerStack` keeps ordinary layers below overlays. Use `push_layer`,
    `push_overlay`, `pop_layer` and `pop_overlay` to change it. Iterating
    runs from bottom to top, and `reversed()` runs from top to bottom.
- `razel.buffer`:
  - `ShaderDataType`, and `shader_data_type_size()` for the size of each type.
  - `BufferElement`, which is frozen and has `size` and `component_count()`.
  - `BufferLayout`, which assigns each element its offset and computes the
    `stride`.
- `razel.camera`:
  - `ortho()` builds an orthographic projection.
  - `view_matrix()` builds a view matrix from a position and a rotation
    about Z, given in degrees.
  - `OrthographicCamera` exposes `position`, `rotation`, `set_projection()`
    and the projection, view and view-projection matrices. All of these are
    numpy arrays.
  - `PerspectiveCamera` has the same position and rotation controls, but its
    bounds are fixed and its projection is orthographic.
- `razel.input`: `Input` is a class-level facade over an `InputBackend` that
  you install with `Input.set_backend()`. Queries made with no backend
  installed raise `RuntimeError`.
- `razel.camera_controller`: `OrthographicCameraController` works as follows.
  - W/A/S/D pan the camera. Q/E rotate it when rotation is enabled.
  - A `MouseScrolledEvent` zooms, with a minimum zoom level of 0.25.
  - A `WindowResizeEvent` updates the aspect ratio.
- `razel.shader`:
  - `preprocess()` splits a combined source at its `#type vertex` and
    `#type fragment` lines.
  - `read_shader_file()` and `shader_name_from_path()` read a shader file and
    take its name from the file's stem.
  - `Shader` holds a name, the stage sources, a bound flag and the uniform
    values uploaded to it.
  - `ShaderLibrary` stores shaders under unique names. Adding a name twice
    raises `ValueError`. Asking for an unknown name raises `KeyError`.
  - Errors in shader files raise `ShaderError`.
- `razel.renderer`:
  - `RendererAPI` is the abstract back end, and `GraphicsAPI` names the
    graphics interfaces.
  - `Renderer` forwards commands to a back end you supply:
    - `init()` initialises the back end.
    - `on_window_resize()` sets the viewport.
    - `begin_scene()` takes the camera's view-projection matrix.
    - `submit()` binds the shader, uploads `u_ViewProjection` and
      `u_Transform`, calls `vertex_array.bind()`, and then calls the back
      end's `draw_indexed()`.
    - `end_scene()` closes the scene.

## What it does not do

The package has none of the following:

- no window or platform layer;
- no application main loop;
- no command-line program;
- no GPU access, so nothing is actually drawn.

`Shader` does not compile GLSL. It records sources, the bind state and the
uniform values. There are no vertex buffer, index buffer, vertex array or
texture objects. `Renderer.submit()` accepts any object that has a `bind()`
method as the vertex array. A real back end has to implement `RendererAPI`
and `InputBackend`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from razel.camera_controller import OrthographicCameraController
from razel.codes import Key
from razel.events import MouseScrolledEvent, WindowResizeEvent
from razel.input import Input, InputBackend
from razel.layers import Layer, LayerStack
from razel.timestep import Timestep


class HeldKeys(InputBackend):
    def __init__(self, keys):
        self.keys = set(keys)

    def is_key_pressed(self, keycode):
        return keycode in self.keys

    def is_mouse_button_pressed(self, button):
        return False

    def mouse_position(self):
        return (0.0, 0.0)


class GameLayer(Layer):
    def __init__(self):
        super().__init__("Game")
        self.controller = OrthographicCameraController(1280 / 720, True)

    def on_update(self, ts):
        super().on_update(ts)
        self.controller.on_update(ts)

    def on_event(self, event):
        super().on_event(event)
        self.controller.on_event(event)


Input.set_backend(HeldKeys({Key.D}))

stack = LayerStack()
game = GameLayer()
stack.push_layer(game)

for layer in stack:                      # bottom to top
    layer.on_update(Timestep(0.016))

for event in (WindowResizeEvent(800, 600), MouseScrolledEvent(0.0, 1.0)):
    for layer in reversed(stack):        # top to bottom
        layer.on_event(event)
        if event.handled:
            break

print(game.controller.camera.position, game.controller.zoom_level)
```

### Shaders and the renderer

```python
import numpy as np

from razel.camera import OrthographicCamera
from razel.renderer import GraphicsAPI, Renderer, RendererAPI
from razel.shader import Shader, ShaderLibrary, ShaderType, preprocess

sources = preprocess("#type vertex\nvoid main() {}\n#type fragment\nvoid main() {}\n")
vertex_src = sources[ShaderType.VERTEX]

library = ShaderLibrary()
library.add(Shader.from_sources("Flat", vertex_src, sources[ShaderType.FRAGMENT]))


class RecordingAPI(RendererAPI):
    graphics_api = GraphicsAPI.OPENGL

    def __init__(self):
        self.calls = []

    def init(self):
        self.calls.append("init")

    def set_viewport(self, x, y, width, height):
        self.calls.append(("viewport", x, y, width, height))

    def set_clear_color(self, color):
        self.calls.append(("clear_color", tuple(color)))

    def clear(self):
        self.calls.append("clear")

    def draw_indexed(self, vertex_array):
        self.calls.append(("draw", vertex_array))


class Quad:
    def bind(self):
        pass


renderer = Renderer(RecordingAPI())
renderer.init()
renderer.begin_scene(OrthographicCamera(-1.6, 1.6, -0.9, 0.9))
renderer.submit(library.get("Flat"), Quad(), np.eye(4) * 1.5)
renderer.end_scene()
```

## Running the tests

```
pytest
```