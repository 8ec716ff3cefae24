"""Everything a running game holds: window, camera, arena and entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .arena import Arena
from .camera import spawn_camera
from .components import Enemy, Player, Timer, Vec3
from .constants import ENEMY_SPAWN_DELAY


def _spawn_timer() -> Timer:
    return Timer(ENEMY_SPAWN_DELAY, repeating=True)


@dataclass(eq=False)
class World:
    """The game's entities and resources."""

    window_size: Tuple[float, float]
    camera: Vec3
    arena: Optional[Arena] = None
    player: Optional[Player] = None
    enemies: List[Enemy] = field(default_factory=list)
    shots: List[Any] = field(default_factory=list)
    spawn_timer: Timer = field(default_factory=_spawn_timer)

    def window_center(self) -> Tuple[float, float]:
        width, height = self.window_size
        return width / 2.0, height / 2.0


def new_world(window_size: Tuple[float, float]) -> World:
    """An empty world with the camera placed at the window centre."""
    width, height = window_size
    size = (float(width), float(height))
    return World(window_size=size, camera=spawn_camera(size))