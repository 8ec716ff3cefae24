"""Camera placement, tracking and screen projection."""

from __future__ import annotations

from typing import Tuple

from .components import Vec3
from .constants import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    CAMERA_ARENA_HEIGHT_OFFSET,
    CAMERA_ARENA_WIDTH_OFFSET,
    CAMERA_DEPTH,
)


def spawn_camera(window_size: Tuple[float, float]) -> Vec3:
    """Initial camera position: the centre of the window."""
    width, height = window_size
    return Vec3(width / 2.0, height / 2.0, CAMERA_DEPTH)


def camera_bounds(window_size: Tuple[float, float]) -> Tuple[Vec3, Vec3]:
    """The region the camera centre is kept in, so little outside the arena shows."""
    cx, cy = window_size[0] / 2.0, window_size[1] / 2.0
    low = Vec3(
        cx - ARENA_WIDTH / 2.0 + (cx - CAMERA_ARENA_WIDTH_OFFSET),
        cy - ARENA_HEIGHT / 2.0 + (cy - CAMERA_ARENA_HEIGHT_OFFSET),
        CAMERA_DEPTH,
    )
    high = Vec3(
        cx + ARENA_WIDTH / 2.0 - (cx - CAMERA_ARENA_WIDTH_OFFSET),
        cy + ARENA_HEIGHT / 2.0 - (cy - CAMERA_ARENA_HEIGHT_OFFSET),
        CAMERA_DEPTH,
    )
    return low, high


def restrict_camera(position: Vec3, window_size: Tuple[float, float]) -> Vec3:
    """Clamp a camera position into :func:`camera_bounds`."""
    low, high = camera_bounds(window_size)
    return position.clamp(low, high)


def follow_player(world) -> None:
    """Move the camera onto the player, if there is one."""
    if world.player is not None:
        world.camera = world.player.position


def world_to_screen(
    position: Vec3, camera: Vec3, window_size: Tuple[float, float]
) -> Tuple[float, float]:
    """Project a world position to pixel coordinates; world y points up, screen y down."""
    width, height = window_size
    return (
        position.x - camera.x + width / 2.0,
        height / 2.0 - (position.y - camera.y),
    )