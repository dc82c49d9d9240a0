"""The application: window, fixed-step main loop and current world."""

from __future__ import annotations

import time
from typing import Callable, Optional, Type, TypeVar

import pygame

from .asset_manager import AssetManager
from .world import World

__all__ = ["Application"]

WorldT = TypeVar("WorldT", bound=World)

_CLEAR_COLOUR = (0, 0, 0)


class Application:
    """Owns the window and runs the current world at a fixed frame rate.

    A surface may be passed as ``window`` to draw off-screen instead of
    opening a display window; ``clock`` returns the time in seconds.
    """

    def __init__(
        self,
        window_width: int,
        window_height: int,
        title: str,
        style: int = 0,
        *,
        window: Optional["pygame.Surface"] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._owns_display = window is None
        if window is None:
            pygame.display.init()
            window = pygame.display.set_mode((window_width, window_height), style)
            pygame.display.set_caption(title)
        self.window = window
        self.title = title
        self.target_frame_rate = 60.0
        self.clean_cycle_interval = 2.0
        self.current_world: Optional[World] = None
        self._clock = clock
        self._clean_cycle_start = clock()
        self._open = True

    @property
    def is_open(self) -> bool:
        """Whether the main loop keeps running."""
        return self._open

    def close(self) -> None:
        """Stop the main loop after the current frame."""
        self._open = False

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        last = self._clock()
        accumulated = 0.0
        target_delta = 1.0 / self.target_frame_rate
        while self._open:
            self._poll_events()
            now = self._clock()
            accumulated += now - last
            last = now
            while accumulated > target_delta:
                accumulated -= target_delta
                self.tick_internal(target_delta)
                self.render_internal()
        if self._owns_display:
            pygame.display.quit()

    def _poll_events(self) -> None:
        if not pygame.display.get_init():
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()

    def load_world(self, world_type: Type[WorldT]) -> WorldT:
        """Replace the current world with a new one of ``world_type``."""
        world = world_type(self)
        self.current_world = world
        world.begin_play_internal()
        return world

    def tick_internal(self, delta_time: float) -> None:
        """Advance the application and its world by one step."""
        self.tick(delta_time)
        if self.current_world is not None:
            self.current_world.begin_play_internal()
            self.current_world.tick_internal(delta_time)

        now = self._clock()
        if now - self._clean_cycle_start >= self.clean_cycle_interval:
            self._clean_cycle_start = now
            AssetManager.get().clear_cycle()

    def render_internal(self) -> None:
        """Clear the window, draw a frame and present it."""
        self.window.fill(_CLEAR_COLOUR)
        self.render()
        if pygame.display.get_init() and pygame.display.get_surface() is self.window:
            pygame.display.flip()

    def render(self) -> None:
        """Draw the current world."""
        if self.current_world is not None:
            self.current_world.render(self.window)

    def tick(self, delta_time: float) -> None:
        """Hook called every step before the world ticks."""