"""Spawning, steering, confining and healing the player."""

from __future__ import annotations

import logging
from typing import Container, Iterable, Tuple

import pygame

from .arena import spawn_arena
from .components import Player, Vec3
from .constants import PLAYER_SPEED, PLAYER_SPRITE_DEPTH, PLAYER_SPRITE_DIAMETER

logger = logging.getLogger(__name__)

_LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
_RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
_UP_KEYS = (pygame.K_UP, pygame.K_w)
_DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)


def _any_pressed(pressed: Container[int], keys: Iterable[int]) -> bool:
    return any(key in pressed for key in keys)


def spawn_player(window_size: Tuple[float, float]) -> Player:
    """A fresh player standing in the middle of the window."""
    width, height = window_size
    return Player(position=Vec3(width / 2.0, height / 2.0, PLAYER_SPRITE_DEPTH))


def movement_direction(pressed: Container[int]) -> Vec3:
    """Unit direction chosen by the held arrow or WASD keys, or zero."""
    x = 0.0
    y = 0.0
    if _any_pressed(pressed, _LEFT_KEYS):
        x -= 1.0
    if _any_pressed(pressed, _RIGHT_KEYS):
        x += 1.0
    if _any_pressed(pressed, _UP_KEYS):
        y += 1.0
    if _any_pressed(pressed, _DOWN_KEYS):
        y -= 1.0
    return Vec3(x, y, 0.0).normalize_or_zero()


def move_player(world, pressed: Container[int], delta: float) -> None:
    """Move the player for ``delta`` seconds according to the held keys."""
    player = world.player
    if player is None:
        return
    direction = movement_direction(pressed).with_z(player.position.z)
    player.position = player.position + direction * PLAYER_SPEED * delta


def restrict_player(world) -> None:
    """Keep the player inside the arena and on its drawing depth."""
    player = world.player
    if player is None:
        return
    low, high = spawn_arena(world.window_size).bounds(
        PLAYER_SPRITE_DIAMETER / 2.0, PLAYER_SPRITE_DEPTH
    )
    player.position = player.position.clamp(low, high)


def check_dead(world) -> bool:
    """Whether the player has run out of health; the game should then end."""
    player = world.player
    if player is None or not player.health.is_dead():
        return False
    logger.info("Player is dead")
    return True


def regen(world, delta: float) -> None:
    """Regenerate the player's health for ``delta`` seconds."""
    if world.player is not None:
        world.player.health.tick_regen(delta)


def despawn_player(world) -> None:
    """Remove the player from the world."""
    world.player = None