"""Spawning, chasing, confining and attacking enemies."""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Tuple

from .arena import spawn_arena
from .components import Enemy, Vec3, circles_intersect
from .constants import (
    ENEMY_DAMAGE,
    ENEMY_INITIAL_AMOUNT,
    ENEMY_SPEED,
    ENEMY_SPRITE_DEPTH,
    ENEMY_SPRITE_DIAMETER,
    PLAYER_SPRITE_DIAMETER,
    SPAWN_AROUND_PLAYER_RADIUS,
)

logger = logging.getLogger(__name__)


def _uniform(rng: random.Random, low: float, high: float) -> float:
    if not low < high:
        raise ValueError(f"cannot sample from the empty range [{low}, {high})")
    return rng.uniform(low, high)


def random_spawn_position(
    screen_l: float,
    screen_r: float,
    screen_d: float,
    screen_u: float,
    player_x: float,
    player_y: float,
    player_r: float,
    enemy_r: float,
    rng: random.Random,
) -> Tuple[float, float]:
    """A random point inside the screen that keeps an enemy clear of the player's circle."""
    if screen_u - screen_d <= (player_r + 2.0 * enemy_r) * 2.0:
        raise ValueError("spawn radius is too large for the height of the screen")
    x = _uniform(rng, screen_l + enemy_r, screen_r - enemy_r)
    if player_x - player_r - enemy_r < x < player_x + player_r + enemy_r:
        offset = math.sqrt((player_r + enemy_r) ** 2 - (x - player_x) ** 2)
        y = _uniform(rng, screen_d + enemy_r, screen_u - enemy_r - 2.0 * offset)
        if y > player_y - offset:
            y += 2.0 * offset
        return x, y
    return x, _uniform(rng, screen_d, screen_u)


def create_enemy(world, rng: random.Random) -> Enemy:
    """A new enemy at a random spot of the arena away from the player."""
    center_x, center_y = world.window_center()
    if world.player is not None:
        player_x, player_y = world.player.position.x, world.player.position.y
    else:
        player_x, player_y = center_x, center_y
    radius = ENEMY_SPRITE_DIAMETER / 2.0
    low, high = spawn_arena(world.window_size).bounds(radius, ENEMY_SPRITE_DEPTH)
    x, y = random_spawn_position(
        low.x,
        high.x,
        low.y,
        high.y,
        player_x,
        player_y,
        SPAWN_AROUND_PLAYER_RADIUS,
        radius,
        rng,
    )
    return Enemy(position=Vec3(x, y, ENEMY_SPRITE_DEPTH))


def initial_spawn(world, rng: random.Random) -> None:
    """Populate the arena with the starting wave of enemies."""
    world.enemies.extend(create_enemy(world, rng) for _ in range(ENEMY_INITIAL_AMOUNT))


def spawn_over_time(world, delta: float, rng: random.Random) -> Optional[Enemy]:
    """Advance the spawn timer; add and return an enemy whenever it fires."""
    world.spawn_timer.tick(delta)
    if not world.spawn_timer.finished:
        return None
    enemy = create_enemy(world, rng)
    world.enemies.append(enemy)
    return enemy


def move_enemies(world, delta: float) -> None:
    """Move every enemy straight towards the player for ``delta`` seconds."""
    if world.player is None:
        return
    target = world.player.position.with_z(ENEMY_SPRITE_DEPTH)
    step = ENEMY_SPEED * delta
    for enemy in world.enemies:
        enemy.position = enemy.position.move_towards(target, step)


def restrict_enemies(world) -> None:
    """Keep every enemy inside the arena and on its drawing depth."""
    low, high = spawn_arena(world.window_size).bounds(
        ENEMY_SPRITE_DIAMETER / 2.0, ENEMY_SPRITE_DEPTH
    )
    for enemy in world.enemies:
        enemy.position = enemy.position.clamp(low, high)


def attack_player(world, delta: float) -> int:
    """Let touching enemies whose attack is ready hurt the player; return the hit count."""
    player = world.player
    if player is None:
        return 0
    hits = 0
    for enemy in world.enemies:
        enemy.attack_timer.tick(delta)
        touching = circles_intersect(
            enemy.position,
            ENEMY_SPRITE_DIAMETER / 2.0,
            player.position,
            PLAYER_SPRITE_DIAMETER / 2.0,
        )
        if touching and enemy.attack_timer.finished:
            player.health.deal_damage(ENEMY_DAMAGE)
            logger.info("Player received %s damage", ENEMY_DAMAGE)
            enemy.attack_timer.reset()
            hits += 1
    return hits


def despawn_dead(world) -> List[Enemy]:
    """Remove enemies without health and return them."""
    dead = [enemy for enemy in world.enemies if enemy.health.is_dead()]
    world.enemies = [enemy for enemy in world.enemies if not enemy.health.is_dead()]
    return dead


def despawn_enemies(world) -> None:
    """Remove every enemy."""
    world.enemies.clear()