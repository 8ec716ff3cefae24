"""The tiled ground the game is played on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import pygame

from .camera import world_to_screen
from .components import Vec3
from .constants import (
    ARENA_HEIGHT,
    ARENA_SPRITE_DEPTH,
    ARENA_TILE_HEIGHT,
    ARENA_TILE_WIDTH,
    ARENA_WIDTH,
    GROUND_COLOR,
    GROUND_LINE_COLOR,
)


def _tile_offsets(length: float, tile: float) -> Iterator[float]:
    offset = tile
    while offset < length:
        yield offset
        offset += tile


@dataclass
class Arena:
    """Rectangular play field centred on ``center``."""

    center: Vec3
    width: float = ARENA_WIDTH
    height: float = ARENA_HEIGHT

    def bounds(self, radius: float, depth: float) -> Tuple[Vec3, Vec3]:
        """Lowest and highest positions a circle of ``radius`` may occupy, at ``depth``."""
        low = Vec3(
            self.center.x - self.width / 2.0 + radius,
            self.center.y - self.height / 2.0 + radius,
            depth,
        )
        high = Vec3(
            self.center.x + self.width / 2.0 - radius,
            self.center.y + self.height / 2.0 - radius,
            depth,
        )
        return low, high

    def draw(self, surface: pygame.Surface, camera: Vec3) -> None:
        """Draw the ground as seen from ``camera``."""
        top_left = Vec3(self.center.x - self.width / 2.0, self.center.y + self.height / 2.0)
        left, top = world_to_screen(top_left, camera, surface.get_size())
        rect = pygame.Rect(round(left), round(top), round(self.width), round(self.height))
        pygame.draw.rect(surface, GROUND_COLOR, rect)
        for offset in _tile_offsets(self.width, ARENA_TILE_WIDTH):
            x = rect.left + round(offset)
            pygame.draw.line(surface, GROUND_LINE_COLOR, (x, rect.top), (x, rect.bottom - 1))
        for offset in _tile_offsets(self.height, ARENA_TILE_HEIGHT):
            y = rect.top + round(offset)
            pygame.draw.line(surface, GROUND_LINE_COLOR, (rect.left, y), (rect.right - 1, y))


def spawn_arena(window_size: Tuple[float, float]) -> Arena:
    """An arena centred on the middle of the window."""
    width, height = window_size
    return Arena(center=Vec3(width / 2.0, height / 2.0, ARENA_SPRITE_DEPTH))