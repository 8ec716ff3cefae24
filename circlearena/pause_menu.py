"""Pausing the game and the overlay shown while it is paused."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from .constants import GRAY
from .states import AppState, GameState, MainMenuState, States
from .widgets import Button, Menu

OVERLAY = (*GRAY, 128)


def toggle_pause(states: States) -> None:
    """Request a switch between playing and paused; other game states are left alone."""
    current = states.current(GameState)
    if current is GameState.PLAY:
        states.request(GameState.PAUSE)
    elif current is GameState.PAUSE:
        states.request(GameState.PLAY)


class PauseMenu:
    """Translucent overlay with Resume and Main menu buttons."""

    def __init__(self) -> None:
        self.resume_button = Button("Resume")
        self.menu_button = Button("Main menu")
        self.menu = Menu([self.resume_button, self.menu_button], background=OVERLAY)

    def on_resume(self, states: States) -> None:
        states.request(GameState.PLAY)

    def on_menu(self, states: States) -> None:
        states.request(AppState.MAIN_MENU)
        states.request(MainMenuState.HOME)
        states.request(GameState.NONE)

    def update(
        self, mouse_pos: Tuple[int, int], mouse_down: bool, states: States
    ) -> Optional[Button]:
        """Track the pointer and act on the button pressed this frame, returning it."""
        pressed = self.menu.update(mouse_pos, mouse_down)
        if pressed is self.resume_button:
            self.on_resume(states)
        elif pressed is self.menu_button:
            self.on_menu(states)
        return pressed

    def draw(self, surface: pygame.Surface) -> None:
        self.menu.draw(surface)