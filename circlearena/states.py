"""Application-wide state machines and the store that switches between them."""

from __future__ import annotations

import enum
from typing import Dict, List, Tuple, Type, Union


class AppState(enum.Enum):
    """Top-level screen the application is showing."""

    MAIN_MENU = enum.auto()
    GAME = enum.auto()
    GAME_OVER = enum.auto()


class GameState(enum.Enum):
    """Whether a running game is being simulated."""

    PAUSE = enum.auto()
    PLAY = enum.auto()
    NONE = enum.auto()


class MainMenuState(enum.Enum):
    """Which page of the main menu is shown."""

    HOME = enum.auto()
    CONTROLS = enum.auto()
    NONE = enum.auto()


AnyState = Union[AppState, GameState, MainMenuState]
StateKind = Type[enum.Enum]


class States:
    """Current value of every state machine plus the transitions requested for the next frame."""

    def __init__(
        self,
        app: AppState = AppState.MAIN_MENU,
        game: GameState = GameState.NONE,
        main_menu: MainMenuState = MainMenuState.HOME,
    ) -> None:
        self._current: Dict[StateKind, AnyState] = {
            AppState: app,
            GameState: game,
            MainMenuState: main_menu,
        }
        self._pending: Dict[StateKind, AnyState] = {}

    def request(self, state: AnyState) -> None:
        """Schedule a switch to ``state``; it takes effect on the next :meth:`apply`."""
        kind = type(state)
        if kind not in self._current:
            raise TypeError(f"{state!r} is not a known state")
        self._pending[kind] = state

    def current(self, kind: StateKind) -> AnyState:
        """Return the active value of the state machine ``kind``."""
        try:
            return self._current[kind]
        except KeyError:
            raise KeyError(f"unknown state kind {kind!r}") from None

    def apply(self) -> List[Tuple[AnyState, AnyState]]:
        """Perform every requested switch and return the ``(old, new)`` pairs that changed."""
        transitions = []
        for kind in self._current:
            if kind not in self._pending:
                continue
            new = self._pending[kind]
            old = self._current[kind]
            if new is not old:
                self._current[kind] = new
                transitions.append((old, new))
        self._pending.clear()
        return transitions