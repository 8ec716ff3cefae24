import math

import pygame
import pytest

from circlearena.arena import spawn_arena
from circlearena.components import Vec3
from circlearena.constants import (
    PLAYER_HEALTH_REGEN,
    PLAYER_INITIAL_HEALTH,
    PLAYER_SPEED,
    PLAYER_SPRITE_DEPTH,
    PLAYER_SPRITE_DIAMETER,
)
from circlearena.player import (
    check_dead,
    despawn_player,
    move_player,
    movement_direction,
    regen,
    restrict_player,
    spawn_player,
)
from circlearena.world import new_world

WINDOW = (800.0, 600.0)


@pytest.fixture
def world():
    w = new_world(WINDOW)
    w.player = spawn_player(WINDOW)
    return w


def test_spawn_player_in_window_centre():
    player = spawn_player(WINDOW)
    assert player.position == Vec3(WINDOW[0] / 2, WINDOW[1] / 2, PLAYER_SPRITE_DEPTH)
    assert player.health.current == PLAYER_INITIAL_HEALTH
    assert player.health.maximum == PLAYER_INITIAL_HEALTH
    assert player.score == 0


def test_no_keys_means_no_direction():
    assert movement_direction(set()) == Vec3()


def test_opposite_keys_cancel():
    assert movement_direction({pygame.K_LEFT, pygame.K_d}) == Vec3()


@pytest.mark.parametrize(
    "keys",
    [{pygame.K_w, pygame.K_d}, {pygame.K_UP, pygame.K_LEFT}, {pygame.K_s, pygame.K_a}],
)
def test_diagonal_direction_is_normalised(keys):
    direction = movement_direction(keys)
    assert math.isclose(direction.length(), 1.0)
    assert abs(direction.x) == pytest.approx(abs(direction.y))


def test_arrow_and_letter_keys_agree():
    assert movement_direction({pygame.K_RIGHT}) == movement_direction({pygame.K_d})
    assert movement_direction({pygame.K_DOWN}) == movement_direction({pygame.K_s})


def test_up_points_to_positive_y():
    direction = movement_direction({pygame.K_w})
    assert direction.y > 0
    assert direction.x == 0


def test_move_player_right(world):
    start = world.player.position
    move_player(world, {pygame.K_d}, 0.1)
    assert world.player.position.x == pytest.approx(start.x + PLAYER_SPEED * 0.1)
    assert world.player.position.y == pytest.approx(start.y)


def test_move_then_restrict_keeps_depth(world):
    move_player(world, {pygame.K_a}, 0.1)
    restrict_player(world)
    assert world.player.position.z == PLAYER_SPRITE_DEPTH


def test_restrict_player_clamps_to_arena(world):
    world.player.position = Vec3(-1e6, 1e6, PLAYER_SPRITE_DEPTH)
    restrict_player(world)
    low, high = spawn_arena(WINDOW).bounds(PLAYER_SPRITE_DIAMETER / 2, PLAYER_SPRITE_DEPTH)
    assert world.player.position == Vec3(low.x, high.y, PLAYER_SPRITE_DEPTH)


def test_check_dead(world):
    assert check_dead(world) is False
    world.player.health.deal_damage(PLAYER_INITIAL_HEALTH)
    assert check_dead(world) is True


def test_check_dead_without_player():
    assert check_dead(new_world(WINDOW)) is False


def test_regen_heals_when_hurt(world):
    world.player.health.deal_damage(10.0)
    regen(world, 1.0)
    assert world.player.health.current == pytest.approx(
        PLAYER_INITIAL_HEALTH - 10.0 + PLAYER_HEALTH_REGEN
    )


def test_regen_does_nothing_at_full_health(world):
    regen(world, 5.0)
    assert world.player.health.current == PLAYER_INITIAL_HEALTH


def test_despawn_player(world):
    despawn_player(world)
    assert world.player is None