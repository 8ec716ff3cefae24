from circlearena.camera import spawn_camera
from circlearena.components import Vec3
from circlearena.constants import CAMERA_DEPTH, ENEMY_SPAWN_DELAY
from circlearena.world import new_world


def test_window_center():
    world = new_world((1920, 1080))
    assert world.window_center() == (960.0, 540.0)


def test_new_world_places_camera_at_center():
    world = new_world((800, 600))
    cx, cy = world.window_center()
    assert world.camera == Vec3(cx, cy, CAMERA_DEPTH)
    assert world.camera == spawn_camera((800, 600))


def test_new_world_is_empty():
    world = new_world((800, 600))
    assert world.player is None
    assert world.arena is None
    assert world.enemies == []
    assert world.shots == []


def test_spawn_timer_repeats_with_spawn_delay():
    world = new_world((800, 600))
    assert world.spawn_timer.repeating
    assert world.spawn_timer.duration == ENEMY_SPAWN_DELAY
    assert not world.spawn_timer.finished


def test_worlds_do_not_share_lists():
    first = new_world((800, 600))
    second = new_world((800, 600))
    first.enemies.append("enemy")
    assert second.enemies == []