"""Actors: textured objects that live in a world."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Optional, Sequence

import pygame
from pygame.math import Vector2

from .asset_manager import AssetManager
from .mathutil import rotation_to_vector
from .objects import Object

if TYPE_CHECKING:
    from .world import World

__all__ = ["Actor"]


def _normalize_angle(degrees: float) -> float:
    angle = math.fmod(degrees, 360.0)
    if angle < 0:
        angle += 360.0
    return angle


class Actor(Object):
    """A sprite with a position and rotation, owned by a world.

    The sprite's pivot is the centre of its texture; rotation is in degrees,
    clockwise on screen, and kept within [0, 360).
    """

    def __init__(self, owning_world: Optional["World"], texture_path: str = "") -> None:
        super().__init__()
        self.owning_world = owning_world
        self._has_begun_play = False
        self._texture: Optional[Any] = None
        self._location = Vector2()
        self._rotation = 0.0
        self.time_in_play = 0.0
        self.set_texture(texture_path)

    def begin_play_internal(self) -> None:
        """Run begin_play the first time only."""
        if not self._has_begun_play:
            self._has_begun_play = True
            self.begin_play()

    def tick_internal(self, delta_time: float) -> None:
        """Tick unless the actor is marked for removal."""
        if not self.is_pending_destroy():
            self.tick(delta_time)

    def begin_play(self) -> None:
        """Hook called once when the actor enters play; resets its play time."""
        self.time_in_play = 0.0

    def tick(self, delta_time: float) -> None:
        """Hook called every frame with the elapsed seconds; adds them to the play time."""
        self.time_in_play += delta_time

    @property
    def texture(self) -> Optional[Any]:
        """The texture currently drawn, or None."""
        return self._texture

    def set_texture(self, texture_path: str) -> None:
        """Load the texture at ``texture_path`` through the shared asset manager."""
        self._texture = AssetManager.get().load_texture(texture_path)

    def render(self, window: "pygame.Surface") -> None:
        """Draw the actor onto ``window``, centred on its location."""
        if self.is_pending_destroy() or self._texture is None:
            return
        image = self._texture
        if self._rotation:
            image = pygame.transform.rotate(image, -self._rotation)
        centre = (round(self._location.x), round(self._location.y))
        window.blit(image, image.get_rect(center=centre))

    @property
    def location(self) -> Vector2:
        """The actor's position in window coordinates."""
        return Vector2(self._location)

    @location.setter
    def location(self, value: Sequence[float]) -> None:
        self._location = Vector2(value)

    @property
    def rotation(self) -> float:
        """The actor's rotation in degrees, within [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = _normalize_angle(value)

    def add_location_offset(self, offset: Sequence[float]) -> None:
        """Move the actor by ``offset``."""
        self.location = self._location + Vector2(offset)

    def add_rotation_offset(self, offset: float) -> None:
        """Turn the actor by ``offset`` degrees."""
        self.rotation = self._rotation + offset

    def forward_direction(self) -> Vector2:
        """Unit vector the actor faces."""
        return rotation_to_vector(self._rotation)

    def right_direction(self) -> Vector2:
        """Unit vector to the actor's right."""
        return rotation_to_vector(self._rotation + 90.0)