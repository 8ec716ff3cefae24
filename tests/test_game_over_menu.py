import pygame

from circlearena.constants import GRAY
from circlearena.game_over_menu import GameOverMenu
from circlearena.states import AppState, GameState, MainMenuState, States
from circlearena.widgets import BUTTON_COLOR, Interaction


def _laid_out_menu():
    menu = GameOverMenu()
    menu.menu.layout((800, 600))
    return menu


def test_restart_starts_new_game():
    states = States(app=AppState.GAME_OVER, game=GameState.NONE)
    GameOverMenu().on_restart(states)
    states.apply()
    assert states.current(AppState) is AppState.GAME
    assert states.current(GameState) is GameState.PLAY


def test_menu_goes_home():
    states = States(app=AppState.GAME_OVER, main_menu=MainMenuState.NONE)
    GameOverMenu().on_menu(states)
    states.apply()
    assert states.current(AppState) is AppState.MAIN_MENU
    assert states.current(MainMenuState) is MainMenuState.HOME
    assert states.current(GameState) is GameState.NONE


def test_click_restart_button():
    menu = _laid_out_menu()
    states = States(app=AppState.GAME_OVER)
    assert menu.update(menu.restart_button.rect.center, True, states) is menu.restart_button
    states.apply()
    assert states.current(AppState) is AppState.GAME


def test_pointer_leaving_restores_color():
    menu = _laid_out_menu()
    states = States(app=AppState.GAME_OVER)
    menu.update(menu.menu_button.rect.center, False, states)
    assert menu.menu_button.interaction is Interaction.HOVERED
    menu.update((0, 0), False, states)
    assert menu.menu_button.interaction is Interaction.NONE
    assert menu.menu_button.color == BUTTON_COLOR
    assert states.apply() == []


def test_title_sits_above_buttons():
    menu = _laid_out_menu()
    assert menu.menu.title == "GAME OVER"
    assert menu.menu.title_rect.bottom <= menu.restart_button.rect.top
    assert menu.restart_button.rect.bottom <= menu.menu_button.rect.top


def test_draw_fills_background():
    surface = pygame.Surface((800, 600))
    GameOverMenu().draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == GRAY