"""Vector maths, timers and the entities that live in the arena."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterator

from .constants import (
    ENEMY_ATTACK_SPEED,
    ENEMY_INITIAL_HEALTH,
    PLAYER_HEALTH_REGEN,
    PLAYER_INITIAL_HEALTH,
    PROJECTILE_CAST_SPEED,
    PROJECTILE_DURATION,
)


@dataclass(frozen=True)
class Vec3:
    """Immutable three-component vector; ``z`` is the drawing depth."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec3:
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def normalize_or_zero(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector if there is none."""
        length = self.length()
        if not 0.0 < length < math.inf:
            return Vec3()
        reciprocal = 1.0 / length
        if not math.isfinite(reciprocal):
            return Vec3()
        return self * reciprocal

    def clamp(self, low: Vec3, high: Vec3) -> Vec3:
        """Clamp each component between ``low`` and ``high``."""
        return Vec3(
            min(max(self.x, low.x), high.x),
            min(max(self.y, low.y), high.y),
            min(max(self.z, low.z), high.z),
        )

    def move_towards(self, target: Vec3, max_step: float) -> Vec3:
        """Step at most ``max_step`` towards ``target``, landing on it when close enough."""
        offset = target - self
        length = offset.length()
        if length <= max_step or length <= 1e-4:
            return target
        return self + offset / length * max_step

    def with_z(self, z: float) -> Vec3:
        return replace(self, z=z)


@dataclass
class Timer:
    """Countdown measured in seconds, either one-shot or repeating."""

    duration: float
    repeating: bool = False
    elapsed: float = 0.0
    finished: bool = False
    times_finished_this_tick: int = 0

    @property
    def just_finished(self) -> bool:
        return self.times_finished_this_tick > 0

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if not self.repeating and self.finished:
            self.times_finished_this_tick = 0
            return self
        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.repeating:
            if self.duration > 0:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed = math.fmod(self.elapsed, self.duration)
            else:
                self.times_finished_this_tick = 2**32 - 1
                self.elapsed = 0.0
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0


@dataclass
class Health:
    """Hit points with a maximum fixed at creation and a per-second regeneration rate."""

    current: float
    regen: float = 0.0
    maximum: float = field(init=False)

    def __post_init__(self) -> None:
        self.maximum = self.current

    def deal_damage(self, damage: float) -> None:
        self.current -= damage

    def tick_regen(self, delta: float) -> None:
        """Regenerate for ``delta`` seconds while below the maximum."""
        if self.current < self.maximum:
            self.current += self.regen * delta

    def is_dead(self) -> bool:
        return self.current <= 0.0


class Projectile:
    """Straight-flying shot with a limited lifetime."""

    def __init__(self, current: Vec3, target: Vec3, speed: float) -> None:
        self.direction = (target - current).normalize_or_zero()
        self.speed = speed
        self.timer = Timer(PROJECTILE_DURATION)

    def __repr__(self) -> str:
        return f"Projectile(direction={self.direction!r}, speed={self.speed!r})"

    def step(self, delta: float) -> Vec3:
        """Age the projectile by ``delta`` seconds and return its displacement."""
        self.timer.tick(delta)
        return self.direction * self.speed * delta

    def is_finished(self) -> bool:
        return self.timer.finished


def _player_health() -> Health:
    return Health(PLAYER_INITIAL_HEALTH, PLAYER_HEALTH_REGEN)


def _cast_timer() -> Timer:
    return Timer(1.0 / PROJECTILE_CAST_SPEED)


def _enemy_health() -> Health:
    return Health(ENEMY_INITIAL_HEALTH, 0.0)


def _ready_attack_timer() -> Timer:
    timer = Timer(1.0 / ENEMY_ATTACK_SPEED)
    timer.tick(timer.duration)
    return timer


@dataclass(eq=False)
class Player:
    """The player's circle, its health, shooting cadence and score."""

    position: Vec3
    health: Health = field(default_factory=_player_health)
    cast_timer: Timer = field(default_factory=_cast_timer)
    score: int = 0


@dataclass(eq=False)
class Enemy:
    """A chasing enemy; it can attack as soon as it spawns."""

    position: Vec3
    health: Health = field(default_factory=_enemy_health)
    attack_timer: Timer = field(default_factory=_ready_attack_timer)


def circles_intersect(center_a: Vec3, radius_a: float, center_b: Vec3, radius_b: float) -> bool:
    """Whether two circles in the x/y plane touch or overlap; depth is ignored."""
    dx = center_a.x - center_b.x
    dy = center_a.y - center_b.y
    reach = radius_a + radius_b
    return dx * dx + dy * dy <= reach * reach