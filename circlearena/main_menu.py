"""The main menu: the home page and the controls page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Container, List, Optional, Tuple

import pygame

from .constants import GRAY, GRAY_500, GRAY_700, WHITE
from .states import AppState, GameState, MainMenuState, States
from .widgets import BORDER_WIDTH, TEXT_MARGIN, TEXT_SIZE, Button, Menu, get_font

CONTROLS: Tuple[Tuple[str, str], ...] = (
    ("move", "wasd/arrows"),
    ("pause/unpause", "esc"),
    ("quit game (from main menu)", "esc"),
)

CONTROLS_AREA_FRACTION = 0.8
ROW_WIDTH_FRACTION = 0.9
DESCRIPTION_WIDTH_FRACTION = 0.6
KEY_WIDTH_FRACTION = 0.37
ROW_INSET_FRACTION = 0.01
ROW_MARGIN = 5
ROW_BOX_MARGIN = 5
ROW_TEXT_MARGIN = 5
RETURN_BUTTON_MARGIN = 2.0


def esc_quit(pressed: Container[int]) -> bool:
    """Whether the held keys ask to leave the game from the home page."""
    return pygame.K_ESCAPE in pressed


class HomeMenu:
    """Start, Quit and Controls buttons centred on a grey background."""

    def __init__(self) -> None:
        self.start_button = Button("Start Game", margin=0.0)
        self.quit_button = Button("Quit Game")
        self.controls_button = Button("Controls")
        self.menu = Menu(
            [self.start_button, self.quit_button, self.controls_button], background=GRAY
        )
        self.quit_requested = False

    def layout(self, size: Tuple[int, int]) -> None:
        """Place the buttons for a screen of ``size``."""
        self.menu.layout(size)

    def on_start(self, states: States) -> None:
        states.request(AppState.GAME)
        states.request(GameState.PLAY)
        states.request(MainMenuState.NONE)

    def on_controls(self, states: States) -> None:
        states.request(MainMenuState.CONTROLS)

    def on_quit(self) -> None:
        self.quit_requested = True

    def update(
        self, mouse_pos: Tuple[int, int], mouse_down: bool, states: States
    ) -> Optional[Button]:
        """Track the pointer and act on the button pressed this frame, returning it."""
        pressed = self.menu.update(mouse_pos, mouse_down)
        if pressed is self.start_button:
            self.on_start(states)
        elif pressed is self.quit_button:
            self.on_quit()
        elif pressed is self.controls_button:
            self.on_controls(states)
        return pressed

    def draw(self, surface: pygame.Surface) -> None:
        self.menu.draw(surface)


def _empty_rect() -> pygame.Rect:
    return pygame.Rect(0, 0, 0, 0)


@dataclass(eq=False)
class ControlRow:
    """One line of the controls table: what an action does and which key does it."""

    description: str
    key: str
    rect: pygame.Rect = field(default_factory=_empty_rect)
    description_rect: pygame.Rect = field(default_factory=_empty_rect)
    key_rect: pygame.Rect = field(default_factory=_empty_rect)


class ControlsScreen:
    """Table of key bindings above a Return button."""

    def __init__(self) -> None:
        self.rows: List[ControlRow] = [ControlRow(desc, key) for desc, key in CONTROLS]
        self.return_button = Button("Return", margin=RETURN_BUTTON_MARGIN)
        self._pointer = Menu([self.return_button], background=GRAY)
        self.controls_area = _empty_rect()
        self.buttons_area = _empty_rect()
        self._size: Optional[Tuple[int, int]] = None

    def layout(self, size: Tuple[int, int]) -> None:
        """Place the table in the top part of the screen and the button below it."""
        width, height = size
        controls_height = round(height * CONTROLS_AREA_FRACTION)
        self.controls_area = pygame.Rect(0, 0, width, controls_height)
        self.buttons_area = pygame.Rect(0, controls_height, width, height - controls_height)

        font = get_font(TEXT_SIZE)
        row_width = round(width * ROW_WIDTH_FRACTION)
        inset = round(row_width * ROW_INSET_FRACTION)
        heights = []
        for row in self.rows:
            text_height = max(font.size(row.description)[1], font.size(row.key)[1])
            heights.append(text_height + 2 * ROW_TEXT_MARGIN)
        total = sum(box + 2 * ROW_BOX_MARGIN + 2 * ROW_MARGIN for box in heights)
        y = (controls_height - total) / 2.0
        for row, box_height in zip(self.rows, heights):
            y += ROW_MARGIN
            row_height = box_height + 2 * ROW_BOX_MARGIN
            row.rect = pygame.Rect(0, round(y), row_width, row_height)
            row.rect.centerx = width // 2
            box_top = row.rect.top + ROW_BOX_MARGIN
            row.description_rect = pygame.Rect(
                row.rect.left + inset,
                box_top,
                round(row_width * DESCRIPTION_WIDTH_FRACTION),
                box_height,
            )
            row.key_rect = pygame.Rect(
                0, box_top, round(row_width * KEY_WIDTH_FRACTION), box_height
            )
            row.key_rect.right = row.rect.right - inset
            y += row_height + ROW_MARGIN

        text_w, text_h = font.size(self.return_button.label)
        pad = 2 * (TEXT_MARGIN + BORDER_WIDTH)
        self.return_button.rect = pygame.Rect(0, 0, text_w + pad, text_h + pad)
        self.return_button.rect.center = self.buttons_area.center
        self._size = (width, height)

    def on_return(self, states: States) -> None:
        states.request(MainMenuState.HOME)

    def update(
        self, mouse_pos: Tuple[int, int], mouse_down: bool, states: States
    ) -> Optional[Button]:
        """Track the pointer and go back home when Return is pressed, returning it."""
        pressed = self._pointer.update(mouse_pos, mouse_down)
        if pressed is self.return_button:
            self.on_return(states)
        return pressed

    def draw(self, surface: pygame.Surface) -> None:
        size = surface.get_size()
        if self._size != size:
            self.layout(size)
        surface.fill(GRAY)
        font = get_font(TEXT_SIZE)
        previous_clip = surface.get_clip()
        surface.set_clip(self.controls_area)
        for row in self.rows:
            pygame.draw.rect(surface, GRAY_700, row.rect, border_radius=row.rect.height // 2)
            for rect, label in (
                (row.description_rect, row.description),
                (row.key_rect, row.key),
            ):
                pygame.draw.rect(surface, GRAY_500, rect, border_radius=rect.height // 2)
                text = font.render(label, True, WHITE)
                surface.blit(text, text.get_rect(center=rect.center))
        surface.set_clip(previous_clip)
        self.return_button.draw(surface, font)