"""Buttons and centred column menus shared by every menu screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

import pygame

from .constants import BLACK, GRAY, GRAY_500, GRAY_700, WHITE

BUTTON_COLOR = GRAY_700
BUTTON_HOVERED_COLOR = GRAY_500
TEXT_SIZE = 24
TITLE_SIZE = 60
TEXT_MARGIN = 10
BORDER_WIDTH = 2


class Interaction(enum.Enum):
    """Pointer state of a button."""

    NONE = enum.auto()
    HOVERED = enum.auto()
    PRESSED = enum.auto()


@lru_cache(maxsize=None)
def _cached_font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def get_font(size: int) -> pygame.font.Font:
    """The default font at ``size`` points, initialising the font module if needed."""
    if not pygame.font.get_init():
        pygame.font.init()
    return _cached_font(size)


@dataclass(eq=False)
class Button:
    """A rounded, labelled button."""

    label: str
    margin: float = 10.0
    rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    interaction: Interaction = Interaction.NONE
    color: Tuple[int, int, int] = BUTTON_COLOR

    def set_interaction(self, interaction: Interaction) -> bool:
        """Apply a new pointer state; return whether it changed."""
        if interaction is self.interaction:
            return False
        self.interaction = interaction
        if interaction is Interaction.HOVERED:
            self.color = BUTTON_HOVERED_COLOR
        elif interaction is Interaction.NONE:
            self.color = BUTTON_COLOR
        return True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        radius = self.rect.height // 2
        pygame.draw.rect(surface, self.color, self.rect, border_radius=radius)
        pygame.draw.rect(surface, BLACK, self.rect, width=BORDER_WIDTH, border_radius=radius)
        text = font.render(self.label, True, WHITE)
        surface.blit(text, text.get_rect(center=self.rect.center))


class Menu:
    """A full-screen background with an optional title and a centred column of buttons."""

    def __init__(
        self,
        buttons: Iterable[Button],
        title: Optional[str] = None,
        background: Sequence[int] = GRAY,
    ) -> None:
        self.buttons: List[Button] = list(buttons)
        self.title = title
        self.background = tuple(background)
        self.title_rect: Optional[pygame.Rect] = None
        self._size: Optional[Tuple[int, int]] = None
        self._mouse_was_down = False

    def layout(self, size: Tuple[int, int]) -> None:
        """Place the title and buttons in a column centred in a screen of ``size``."""
        width, height = size
        button_font = get_font(TEXT_SIZE)
        blocks: List[Tuple[pygame.Rect, float]] = []
        title_rect = None
        if self.title is not None:
            text_w, text_h = get_font(TITLE_SIZE).size(self.title)
            title_rect = pygame.Rect(0, 0, text_w, text_h)
            blocks.append((title_rect, TEXT_MARGIN))
        for button in self.buttons:
            text_w, text_h = button_font.size(button.label)
            pad = 2 * (TEXT_MARGIN + BORDER_WIDTH)
            button.rect = pygame.Rect(0, 0, text_w + pad, text_h + pad)
            blocks.append((button.rect, button.margin))
        total = sum(rect.height + 2 * margin for rect, margin in blocks)
        y = (height - total) / 2.0
        for rect, margin in blocks:
            y += margin
            rect.centerx = width // 2
            rect.top = round(y)
            y += rect.height + margin
        self.title_rect = title_rect
        self._size = (width, height)

    def update(self, mouse_pos: Tuple[int, int], mouse_down: bool) -> Optional[Button]:
        """Track the pointer; return the button that became pressed this frame, if any."""
        just_pressed = mouse_down and not self._mouse_was_down
        just_released = self._mouse_was_down and not mouse_down
        self._mouse_was_down = mouse_down
        pressed = None
        for button in self.buttons:
            state = button.interaction
            if just_released and state is Interaction.PRESSED:
                state = Interaction.NONE
            if button.rect.collidepoint(mouse_pos):
                if just_pressed:
                    state = Interaction.PRESSED
                elif state is Interaction.NONE:
                    state = Interaction.HOVERED
            elif state is not Interaction.PRESSED:
                state = Interaction.NONE
            changed = button.set_interaction(state)
            if changed and state is Interaction.PRESSED and pressed is None:
                pressed = button
        return pressed

    def draw(self, surface: pygame.Surface) -> None:
        size = surface.get_size()
        if self._size != size:
            self.layout(size)
        if len(self.background) == 4:
            overlay = pygame.Surface(size, pygame.SRCALPHA)
            overlay.fill(self.background)
            surface.blit(overlay, (0, 0))
        else:
            surface.fill(self.background)
        if self.title is not None and self.title_rect is not None:
            text = get_font(TITLE_SIZE).render(self.title, True, WHITE)
            surface.blit(text, self.title_rect)
        font = get_font(TEXT_SIZE)
        for button in self.buttons:
            button.draw(surface, font)