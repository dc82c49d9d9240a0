# lightyears

A small 2D game engine with a space-shooter demo, built on pygame.

## Installing

```
pip install .
```

## Running the demo

```
lightyears
```

This opens a 600×980 window titled "LightYear", loads a world, spawns two
actors (one without a texture, and a player ship at (300, 490) turned 90
degrees), and destroys the ship once a little over two seconds have passed.
Close the window to quit.

The ship image is loaded from `get_resource_dir()` followed by
`SpaceShooterRedux/PNG/playerShip1_blue.png`. `lightyears.game.get_resource_dir()`
returns `"assets/"`, so the path is relative to the directory you start the
game from. If the image cannot be loaded the actor has no texture and nothing
is drawn for it.

## The engine

- `lightyears.application.Application(window_width, window_height, title, style=0, *, window=None, clock=time.monotonic)`
  opens a pygame display window (`style` is passed to
  `pygame.display.set_mode` as its flags) and runs a fixed-step loop with
  `run()`: 60 steps per second by default (`target_frame_rate`). Each step
  calls `tick_internal(delta_time)` and then `render_internal()`. The loop
  ends when the window receives a quit event or `close()` is called;
  `is_open` tells whether it is still running. Passing a `pygame.Surface` as
  `window` draws off-screen instead of opening a display, and `clock` may be
  any function returning the time in seconds.
- `Application.load_world(world_type)` creates a world of that type, makes
  it `current_world`, starts its play and returns it. Override
  `Application.tick(delta_time)` for per-step logic; `render()` draws the
  current world. Every `clean_cycle_interval` seconds (2 by default) the
  application asks the asset manager to drop unused textures.
- `lightyears.world.World` holds actors. `spawn_actor(actor_type)` creates
  an actor of an `Actor` subclass (anything else raises `TypeError`) and
  returns it; it joins `actors` and has `begin_play` called at the start of
  the next tick. During a tick, actors marked for destruction are dropped and
  the rest have `tick(delta_time)` called, followed by the world's own
  `tick`. `begin_play` and `tick` are hooks that keep `time_in_play`.
- `lightyears.actor.Actor(owning_world, texture_path="")` is a sprite drawn
  centred on its `location` (a `pygame.math.Vector2`) and turned by its
  `rotation` in degrees, kept within [0, 360). It offers
  `add_location_offset(offset)`, `add_rotation_offset(offset)`,
  `forward_direction()`, `right_direction()`, `set_texture(texture_path)`,
  the read-only `texture`, and `render(window)`. Its `begin_play` and
  `tick` hooks keep `time_in_play`.
- `lightyears.objects.Object.destroy()` marks an object for removal;
  `is_pending_destroy()` reports it.
- `lightyears.asset_manager.AssetManager.get()` returns the shared texture
  cache. `load_texture(path)` loads each path once and returns `None` when
  the file cannot be loaded; `clear_cycle()` forgets textures that nothing
  but the cache still references, logging each one it drops.
- `lightyears.mathutil` holds `rotation_to_vector`, `degrees_to_radians`
  and `radians_to_degrees`.
- `lightyears.core.log(message, *args)` prints a printf-style formatted line.

## Writing your own game

Subclass `Application`, load a world and spawn actors in its constructor,
and override `tick(delta_time)` for per-step logic:

```python
from lightyears.actor import Actor
from lightyears.application import Application
from lightyears.world import World


class MyGame(Application):
    def __init__(self):
        super().__init__(800, 600, "My game")
        world = self.load_world(World)
        ship = world.spawn_actor(Actor)
        ship.set_texture("assets/ship.png")
        ship.location = (400, 300)

    def tick(self, delta_time):
        pass


MyGame().run()
```

## What it does not do

The demo is not a playable game: there is no player input, movement,
shooting, enemies, collision, sound or score. No image files are shipped
with the package; the demo ship is only drawn if you provide the image under
`assets/` yourself.

## Running the tests

```
pip install .[test]
pytest
```