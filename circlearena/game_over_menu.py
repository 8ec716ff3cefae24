"""The screen shown once the player has died."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from .constants import GRAY
from .states import AppState, GameState, MainMenuState, States
from .widgets import Button, Menu

TITLE = "GAME OVER"


class GameOverMenu:
    """Title with Restart and Main menu buttons on a grey background."""

    def __init__(self) -> None:
        self.restart_button = Button("Restart")
        self.menu_button = Button("Main menu")
        self.menu = Menu(
            [self.restart_button, self.menu_button], title=TITLE, background=GRAY
        )

    def on_restart(self, states: States) -> None:
        states.request(GameState.PLAY)
        states.request(AppState.GAME)

    def on_menu(self, states: States) -> None:
        states.request(AppState.MAIN_MENU)
        states.request(MainMenuState.HOME)
        states.request(GameState.NONE)

    def update(
        self, mouse_pos: Tuple[int, int], mouse_down: bool, states: States
    ) -> Optional[Button]:
        """Track the pointer and act on the button pressed this frame, returning it."""
        pressed = self.menu.update(mouse_pos, mouse_down)
        if pressed is self.restart_button:
            self.on_restart(states)
        elif pressed is self.menu_button:
            self.on_menu(states)
        return pressed

    def draw(self, surface: pygame.Surface) -> None:
        self.menu.draw(surface)