import pygame
import pytest

from lightyears.actor import Actor
from lightyears.world import World

RED = (255, 0, 0)


@pytest.fixture
def ship(tmp_path):
    surface = pygame.Surface((20, 10))
    surface.fill(RED)
    path = str(tmp_path / "ship.bmp")
    pygame.image.save(surface, path)
    return path


class Recording(Actor):
    def __init__(self, world):
        super().__init__(world)
        self.begun = 0
        self.deltas = []

    def begin_play(self):
        self.begun += 1

    def tick(self, delta_time):
        self.deltas.append(delta_time)


class CountingWorld(World):
    def __init__(self, app):
        super().__init__(app)
        self.begun = 0

    def begin_play(self):
        self.begun += 1


class OrderActor(Actor):
    def tick(self, delta_time):
        self.owning_world.order.append("actor")


class OrderWorld(World):
    def __init__(self, app):
        super().__init__(app)
        self.order = []

    def tick(self, delta_time):
        self.order.append("world")


def test_spawned_actor_waits_for_tick():
    world = World(None)
    actor = world.spawn_actor(Recording)
    assert world.actors == ()
    assert actor.owning_world is world
    assert actor.begun == 0


def test_tick_admits_and_ticks_actor():
    world = World(None)
    actor = world.spawn_actor(Recording)
    world.tick_internal(0.1)
    world.tick_internal(0.2)
    assert world.actors == (actor,)
    assert actor.begun == 1
    assert actor.deltas == [0.1, 0.2]


def test_destroyed_actor_is_removed():
    world = World(None)
    keep = world.spawn_actor(Recording)
    drop = world.spawn_actor(Recording)
    world.tick_internal(0.1)
    drop.destroy()
    world.tick_internal(0.2)
    assert world.actors == (keep,)
    assert drop.deltas == [0.1]
    assert keep.deltas == [0.1, 0.2]


def test_spawn_rejects_non_actor():
    world = World(None)
    with pytest.raises(TypeError):
        world.spawn_actor(object)
    with pytest.raises(TypeError):
        world.spawn_actor(Recording(None))


def test_begin_play_runs_once():
    world = CountingWorld(None)
    World.begin_play_internal(world)
    World.begin_play_internal(world)
    assert world.begun == 1


def test_world_tick_follows_actor_ticks():
    world = OrderWorld(None)
    actor = World.spawn_actor(world, OrderActor)
    assert isinstance(actor, OrderActor)
    assert actor.owning_world is world
    World.tick_internal(world, 0.1)
    assert world.actors == (actor,)
    assert world.order == ["actor", "world"]


def test_owning_app_is_kept():
    app = object()
    assert World(app).owning_app is app


def test_render_draws_actors_in_play(ship):
    class ShipActor(Actor):
        def __init__(self, world):
            super().__init__(world, ship)

    world = World(None)
    actor = world.spawn_actor(ShipActor)
    actor.location = (30, 30)
    window = pygame.Surface((60, 60))
    world.render(window)
    assert tuple(window.get_at((30, 30)))[:3] == (0, 0, 0)
    world.tick_internal(0.1)
    world.render(window)
    assert tuple(window.get_at((30, 30)))[:3] == RED