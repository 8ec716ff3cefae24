"""Heads-up display: the player's health bar and score."""

from __future__ import annotations

from typing import Tuple

import pygame

from .components import Health
from .constants import GREEN_500, HEALTH_BAR_LENGTH, RED_500, WHITE
from .widgets import TEXT_SIZE, get_font

BAR_HEIGHT = 20
BAR_OFFSET = 10
SCORE_OFFSET = 10
SCORE_LABEL = "Score: "


def health_bar_widths(health: Health) -> Tuple[float, float]:
    """Pixel widths of the green (remaining) and red (lost) parts of the health bar."""
    fraction_green = health.current / health.maximum
    fraction_red = (health.maximum - health.current) / health.maximum
    return HEALTH_BAR_LENGTH * fraction_green, HEALTH_BAR_LENGTH * fraction_red


class Hud:
    """Health bar in the top left corner and score in the top right corner."""

    def __init__(self) -> None:
        self.green_width = HEALTH_BAR_LENGTH
        self.red_width = 0.0
        self.score_text = "0"

    @property
    def text(self) -> str:
        return SCORE_LABEL + self.score_text

    def update(self, world) -> None:
        """Refresh the bar and score from the world's player, if there is one."""
        player = world.player
        if player is None:
            return
        self.green_width, self.red_width = health_bar_widths(player.health)
        self.score_text = str(player.score)

    def draw(self, surface: pygame.Surface) -> None:
        green = max(0, round(self.green_width))
        red = max(0, round(self.red_width))
        if green:
            pygame.draw.rect(
                surface, GREEN_500, pygame.Rect(BAR_OFFSET, BAR_OFFSET, green, BAR_HEIGHT)
            )
        if red:
            pygame.draw.rect(
                surface,
                RED_500,
                pygame.Rect(BAR_OFFSET + green, BAR_OFFSET, red, BAR_HEIGHT),
            )
        rendered = get_font(TEXT_SIZE).render(self.text, True, WHITE)
        rect = rendered.get_rect(
            topright=(surface.get_width() - SCORE_OFFSET, SCORE_OFFSET)
        )
        surface.blit(rendered, rect)