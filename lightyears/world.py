"""Worlds hold and drive a set of actors."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple, Type, TypeVar

import pygame

from .actor import Actor

if TYPE_CHECKING:
    from .application import Application

__all__ = ["World"]

ActorT = TypeVar("ActorT", bound=Actor)


class World:
    """A level: spawns actors, ticks them and removes destroyed ones."""

    def __init__(self, owning_app: Optional["Application"]) -> None:
        self.owning_app = owning_app
        self._has_begun_play = False
        self._actors: List[Actor] = []
        self._pending_actors: List[Actor] = []
        self.time_in_play = 0.0

    @property
    def actors(self) -> Tuple[Actor, ...]:
        """Actors currently in play, in spawn order."""
        return tuple(self._actors)

    def begin_play_internal(self) -> None:
        """Run begin_play the first time only."""
        if not self._has_begun_play:
            self._has_begun_play = True
            self.begin_play()

    def tick_internal(self, delta_time: float) -> None:
        """Admit newly spawned actors, drop destroyed ones and tick the rest."""
        for actor in self._pending_actors:
            self._actors.append(actor)
            actor.begin_play_internal()
        self._pending_actors.clear()

        survivors = []
        for actor in self._actors:
            if actor.is_pending_destroy():
                continue
            actor.tick(delta_time)
            survivors.append(actor)
        self._actors = survivors
        self.tick(delta_time)

    def render(self, window: "pygame.Surface") -> None:
        """Draw every actor in play onto ``window``."""
        for actor in self._actors:
            actor.render(window)

    def spawn_actor(self, actor_type: Type[ActorT]) -> ActorT:
        """Create an actor of ``actor_type``; it enters play on the next tick."""
        if not (isinstance(actor_type, type) and issubclass(actor_type, Actor)):
            raise TypeError(f"{actor_type!r} is not an Actor type")
        actor = actor_type(self)
        self._pending_actors.append(actor)
        return actor

    def begin_play(self) -> None:
        """Hook called once when the world enters play; resets its play time."""
        self.time_in_play = 0.0

    def tick(self, delta_time: float) -> None:
        """Hook called every frame after the actors have ticked; adds to the play time."""
        self.time_in_play += delta_time