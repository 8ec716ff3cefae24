import pygame
import pytest

from circlearena.constants import GRAY
from circlearena.main_menu import CONTROLS, ControlsScreen, HomeMenu, esc_quit
from circlearena.states import AppState, GameState, MainMenuState, States
from circlearena.widgets import BUTTON_HOVERED_COLOR, Interaction

SIZE = (800, 600)


@pytest.fixture
def home():
    menu = HomeMenu()
    menu.layout(SIZE)
    return menu


@pytest.fixture
def controls():
    screen = ControlsScreen()
    screen.layout(SIZE)
    return screen


def test_esc_quit_when_escape_held():
    assert esc_quit({pygame.K_ESCAPE}) is True


@pytest.mark.parametrize("keys", [set(), {pygame.K_a}, {pygame.K_LEFT, pygame.K_w}])
def test_esc_quit_without_escape(keys):
    assert esc_quit(keys) is False


def test_home_button_labels():
    menu = HomeMenu()
    assert [b.label for b in menu.menu.buttons] == ["Start Game", "Quit Game", "Controls"]


def test_on_start_enters_game():
    states = States()
    HomeMenu().on_start(states)
    states.apply()
    assert states.current(AppState) is AppState.GAME
    assert states.current(GameState) is GameState.PLAY
    assert states.current(MainMenuState) is MainMenuState.NONE


def test_on_controls_switches_page():
    states = States()
    HomeMenu().on_controls(states)
    assert states.apply() == [(MainMenuState.HOME, MainMenuState.CONTROLS)]


def test_on_quit_requests_exit():
    menu = HomeMenu()
    assert menu.quit_requested is False
    menu.on_quit()
    assert menu.quit_requested is True


def test_hover_then_press_start(home):
    states = States()
    center = home.start_button.rect.center
    assert home.update(center, False, states) is None
    assert home.start_button.interaction is Interaction.HOVERED
    assert home.start_button.color == BUTTON_HOVERED_COLOR
    assert home.update(center, True, states) is home.start_button
    states.apply()
    assert states.current(AppState) is AppState.GAME


def test_press_quit_button(home):
    states = States()
    assert home.update(home.quit_button.rect.center, True, states) is home.quit_button
    assert home.quit_requested is True
    assert states.apply() == []


def test_press_controls_button(home):
    states = States()
    home.update(home.controls_button.rect.center, True, states)
    states.apply()
    assert states.current(MainMenuState) is MainMenuState.CONTROLS


def test_home_buttons_do_not_overlap(home):
    rects = [b.rect for b in home.menu.buttons]
    assert rects[0].bottom <= rects[1].top
    assert rects[1].bottom <= rects[2].top


def test_home_draw_fills_background():
    surface = pygame.Surface(SIZE)
    HomeMenu().draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == GRAY


def test_controls_rows_follow_table(controls):
    assert [(r.description, r.key) for r in controls.rows] == list(CONTROLS)


def test_controls_layout_areas(controls):
    for row in controls.rows:
        assert controls.controls_area.contains(row.rect)
        assert row.rect.contains(row.description_rect)
        assert row.rect.contains(row.key_rect)
        assert row.description_rect.right <= row.key_rect.left
    assert controls.buttons_area.contains(controls.return_button.rect)
    tops = [r.rect.top for r in controls.rows]
    assert tops == sorted(tops)


def test_on_return_goes_home():
    states = States(main_menu=MainMenuState.CONTROLS)
    ControlsScreen().on_return(states)
    states.apply()
    assert states.current(MainMenuState) is MainMenuState.HOME


def test_press_return_button(controls):
    states = States(main_menu=MainMenuState.CONTROLS)
    pressed = controls.update(controls.return_button.rect.center, True, states)
    assert pressed is controls.return_button
    states.apply()
    assert states.current(MainMenuState) is MainMenuState.HOME


def test_pointer_elsewhere_does_nothing(controls):
    states = States(main_menu=MainMenuState.CONTROLS)
    assert controls.update((0, 0), True, states) is None
    assert states.apply() == []


def test_controls_draw_lays_out_and_fills():
    screen = ControlsScreen()
    surface = pygame.Surface(SIZE)
    screen.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == GRAY
    assert screen.buttons_area.contains(screen.return_button.rect)