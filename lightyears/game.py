"""The LightYears game application and its command entry point."""

from __future__ import annotations

import weakref
from typing import Any, Optional, Sequence

from pygame.math import Vector2

from .actor import Actor
from .application import Application
from .world import World

__all__ = ["GameApplication", "get_resource_dir", "main"]

PLAYER_SHIP_TEXTURE = "SpaceShooterRedux/PNG/playerShip1_blue.png"


def get_resource_dir() -> str:
    """Directory holding the game's assets."""
    return "assets/"


class GameApplication(Application):
    """Opens the game window, spawns a ship and destroys it after two seconds."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(600, 980, "LightYear", **kwargs)
        world = self.load_world(World)
        world.spawn_actor(Actor)
        ship = world.spawn_actor(Actor)
        ship.set_texture(get_resource_dir() + PLAYER_SHIP_TEXTURE)
        ship.location = Vector2(300.0, 490.0)
        ship.rotation = 90.0
        self._actor_to_destroy = weakref.ref(ship)
        self.counter = 0.0

    @property
    def actor_to_destroy(self) -> Optional[Actor]:
        """The ship, or None once the world has let it go."""
        return self._actor_to_destroy()

    def tick(self, delta_time: float) -> None:
        """Count time and destroy the ship once two seconds have passed."""
        self.counter += delta_time
        if self.counter > 2.0:
            ship = self._actor_to_destroy()
            if ship is not None:
                ship.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game and run it until its window is closed."""
    GameApplication().run()
    return 0