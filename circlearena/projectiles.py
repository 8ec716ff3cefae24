"""Shots the player fires automatically at the closest enemy."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .components import Projectile, Vec3, circles_intersect
from .constants import (
    ENEMY_SPRITE_DIAMETER,
    PROJECTILE_DAMAGE,
    PROJECTILE_SPEED,
    PROJECTILE_SPRITE_DEPTH,
    PROJECTILE_SPRITE_DIAMETER,
)


@dataclass(eq=False)
class Shot:
    """A projectile in flight and where it currently is."""

    position: Vec3
    projectile: Projectile


def spawn_projectile(world, delta: float) -> Optional[Shot]:
    """Advance the cast timer and, when ready, fire at the closest enemy."""
    player = world.player
    if player is None:
        return None
    player.cast_timer.tick(delta)
    if not player.cast_timer.finished:
        return None
    closest = None
    closest_distance = math.inf
    for enemy in world.enemies:
        distance = player.position.distance(enemy.position)
        if distance < closest_distance:
            closest, closest_distance = enemy, distance
    if closest is None:
        return None
    start = player.position.with_z(PROJECTILE_SPRITE_DEPTH)
    target = closest.position.with_z(PROJECTILE_SPRITE_DEPTH)
    shot = Shot(position=start, projectile=Projectile(start, target, PROJECTILE_SPEED))
    world.shots.append(shot)
    player.cast_timer.reset()
    return shot


def move_projectiles(world, delta: float) -> None:
    """Fly and age every shot for ``delta`` seconds."""
    for shot in world.shots:
        shot.position = shot.position + shot.projectile.step(delta)


def hit_targets(world) -> int:
    """Damage enemies that shots touch and drop spent shots; return how many were dropped."""
    spent = set()
    for shot in world.shots:
        hit = False
        for enemy in world.enemies:
            if circles_intersect(
                shot.position,
                PROJECTILE_SPRITE_DIAMETER / 2.0,
                enemy.position,
                ENEMY_SPRITE_DIAMETER / 2.0,
            ):
                spent.add(id(shot))
                enemy.health.deal_damage(PROJECTILE_DAMAGE)
                hit = True
                if world.player is not None:
                    world.player.score += 1
        if shot.projectile.is_finished() and not hit:
            spent.add(id(shot))
    world.shots = [shot for shot in world.shots if id(shot) not in spent]
    return len(spent)


def despawn_projectiles(world) -> None:
    """Remove every shot."""
    world.shots.clear()