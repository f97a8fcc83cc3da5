# nsengine

Core building blocks for a small real-time game engine, as plain Python
modules that need no window or graphics context.

## What is inside

- `nsengine.vec` – `Vec2`, `Vec3`, `Vec4` and `IVec2` with element-wise
  arithmetic, `dot`, `cross`, `normalize`, `length`, `length_sq`, direction
  helpers such as `up3()` and `forward3()`, and constants such as `PI`,
  `DEG_2_RAD` and `SQRT_2`.
- `nsengine.mat4` – 4×4 matrices as numpy arrays: `identity`, `translate`,
  `rotate`, `scale`, `inverse`, `transpose`, `perspective`,
  `perspective_lh`, `orthographic`, `lookat`, `lookat_lh`, the `mk4_*`
  constructors and the `forward`/`backward`/`up`/`down`/`left`/`right`
  basis helpers.
- `nsengine.geometry` – `clamp`, point distances and directions,
  `lengthdir_*`, segment tests (`segment_intersect`,
  `point_distance_to_segment`, `segment_distance_x`/`_y`), `barycentric`,
  rectangle tests, angle conversion and random helpers (`rand`,
  `randrange`, `frand`, `frandrange`, …) seeded from the clock on first use.
- `nsengine.timer` – `Timer`, a frame counter that follows a global game
  speed (`set_game_speed`, `get_game_speed`) and can tell which integer
  values it passed through on its last update (`had_value`, `was_modulo`,
  `had_true`, `count_true`).
- `nsengine.interp` – easing functions (`get_interp_func`, `InterpMethod`)
  and the stepping interpolators `Interp` (numbers or vectors) and
  `InterpStrange` (a `Vec3` with one method overall or one per axis).
- `nsengine.color` – byte (`Color`, saturating arithmetic) and float
  (`Colorf`) colours with packing to and from 32-bit values, HSV, inversion,
  blending, lerping and `mix`.
- `nsengine.events` – `Key`, `Btn`, `InputEvent`, the `EventHandler` base
  class and `EventHandlerList`, which keeps handlers in ascending priority.
- `nsengine.input` – `InputManager`, which tracks keyboard and mouse state
  between frames, fed by `InputHandler` objects.
- `nsengine.console` – coloured writes to standard output and standard
  error, `absolute_time()` and `sleep_ms()`.
- `nsengine.filesystem` – `exists`, `open_file` with `FileMode` flags and a
  `File` handle usable as a context manager.
- `nsengine.logger` – `Logger` and `LogLevel`; messages go to the console
  and to a log file (`console.log` by default, or none with `Logger(None)`),
  plus `initialize_logging`, `log_output`, `shutdown_logging` and
  `ns_assert`.
- `nsengine.memory` – tagged accounting of allocations (`MemTag`,
  `alloc_raw`, `free_raw`, `alloc_n`, `get_memory_usage_str`,
  `get_memory_stats`) returning zeroed `bytearray` buffers, and the
  `mem_zero`, `mem_copy`, `mem_set` helpers.

## Install

```
pip install .
```

## Examples

Easing and interpolation:

```python
from nsengine.interp import Interp, InterpMethod, get_interp_func

ease = get_interp_func(InterpMethod.EASEIN2)
ease(0.5)           # 0.25

anim = Interp(0.0)
anim.start(0.0, 1.0, 4, InterpMethod.LINEAR)
[anim.step() for _ in range(4)]   # [0.25, 0.5, 0.75, 1.0]
```

Timers:

```python
from nsengine.timer import Timer

t = Timer(0)
t.increment()
t.ticked()          # True
t.was_modulo(1)     # 1
```

Geometry and matrices:

```python
from nsengine import geometry, mat4

geometry.point_distance(0, 0, 3, 4)                          # 5.0
geometry.segment_intersect((0, 0), (2, 2), (0, 2), (2, 0))   # True
mat4.mk4_translate((1, 2, 3)) @ [0, 0, 0, 1]                 # array([1., 2., 3., 1.])
```

Input state:

```python
from nsengine.events import InputEvent, Key
from nsengine.input import InputManager

manager = InputManager()
handler = manager.create_handler(window=None)
handler.on_key(InputEvent.PRESS, Key.P)
manager.key_pressed(Key.P)   # True
manager.update(0.016)
manager.key_pressed(Key.P)   # False, still down
```

Colours:

```python
from nsengine.color import Color, Colorf

Color.from_rgba32(0xFF8000FF).to_argb32()   # 0xFFFF8000
Colorf(1.0, 0.0, 0.0).hue()                 # 0.0
```

## What it does not do

The package opens no window, renders nothing, plays no sound and runs no
game loop. There is no platform event source: `EventHandler` and
`EventHandlerList` define how events are dispatched, and `InputHandler`
records them, but your own code has to call the `on_*` methods with the
events it receives. `memory` counts allocations; it does not manage a heap.

## Running the tests

```
pip install .[test]
pytest
```