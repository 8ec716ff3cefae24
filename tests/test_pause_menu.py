import pygame

from circlearena.states import AppState, GameState, MainMenuState, States
from circlearena.pause_menu import PauseMenu, toggle_pause
from circlearena.widgets import BUTTON_HOVERED_COLOR, Interaction


def _laid_out_menu():
    menu = PauseMenu()
    menu.menu.layout((800, 600))
    return menu


def test_toggle_pauses_playing_game():
    states = States(app=AppState.GAME, game=GameState.PLAY)
    toggle_pause(states)
    states.apply()
    assert states.current(GameState) is GameState.PAUSE


def test_toggle_resumes_paused_game():
    states = States(app=AppState.GAME, game=GameState.PAUSE)
    toggle_pause(states)
    states.apply()
    assert states.current(GameState) is GameState.PLAY


def test_toggle_ignores_none_state():
    states = States(game=GameState.NONE)
    toggle_pause(states)
    assert states.apply() == []


def test_on_menu_returns_to_main_menu():
    states = States(app=AppState.GAME, game=GameState.PAUSE, main_menu=MainMenuState.NONE)
    PauseMenu().on_menu(states)
    states.apply()
    assert states.current(AppState) is AppState.MAIN_MENU
    assert states.current(MainMenuState) is MainMenuState.HOME
    assert states.current(GameState) is GameState.NONE


def test_hover_then_click_resume():
    menu = _laid_out_menu()
    states = States(app=AppState.GAME, game=GameState.PAUSE)
    center = menu.resume_button.rect.center
    assert menu.update(center, False, states) is None
    assert menu.resume_button.interaction is Interaction.HOVERED
    assert menu.resume_button.color == BUTTON_HOVERED_COLOR
    assert menu.update(center, True, states) is menu.resume_button
    states.apply()
    assert states.current(GameState) is GameState.PLAY


def test_click_menu_button():
    menu = _laid_out_menu()
    states = States(app=AppState.GAME, game=GameState.PAUSE)
    center = menu.menu_button.rect.center
    assert menu.update(center, True, states) is menu.menu_button
    states.apply()
    assert states.current(AppState) is AppState.MAIN_MENU


def test_buttons_are_stacked_vertically():
    menu = _laid_out_menu()
    assert menu.resume_button.rect.bottom <= menu.menu_button.rect.top
    assert menu.resume_button.rect.centerx == menu.menu_button.rect.centerx


def test_draw_is_translucent():
    surface = pygame.Surface((800, 600))
    surface.fill((255, 255, 255))
    PauseMenu().draw(surface)
    r, g, b = tuple(surface.get_at((0, 0)))[:3]
    assert all(128 < channel < 255 for channel in (r, g, b))