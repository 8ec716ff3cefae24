"""The application: state-driven frame loop, rendering and the command entry point."""

from __future__ import annotations

import argparse
import random
from typing import Container, Optional, Sequence, Tuple

import pygame

from .arena import spawn_arena
from .camera import follow_player, restrict_camera, world_to_screen
from .constants import (
    BLACK,
    ENEMY_COLOR,
    ENEMY_SPRITE_DIAMETER,
    PLAYER_COLOR,
    PLAYER_SPRITE_DIAMETER,
    PROJECTILE_COLOR,
    PROJECTILE_SPRITE_DIAMETER,
)
from .enemies import (
    attack_player,
    despawn_dead,
    despawn_enemies,
    initial_spawn,
    move_enemies,
    restrict_enemies,
    spawn_over_time,
)
from .game_over_menu import GameOverMenu
from .hud import Hud
from .main_menu import ControlsScreen, HomeMenu, esc_quit
from .pause_menu import PauseMenu, toggle_pause
from .player import (
    check_dead,
    despawn_player,
    move_player,
    regen,
    restrict_player,
    spawn_player,
)
from .projectiles import (
    despawn_projectiles,
    hit_targets,
    move_projectiles,
    spawn_projectile,
)
from .states import AnyState, AppState, GameState, MainMenuState, States
from .world import new_world

FPS = 60
CAPTION = "Circle Arena"
_OFF_SCREEN = (-1, -1)


class Game:
    """Every screen of the application, switched by the state machines in :attr:`states`."""

    def __init__(
        self, window_size: Tuple[float, float], rng: Optional[random.Random] = None
    ) -> None:
        width, height = window_size
        self.screen_size = (int(width), int(height))
        self.states = States()
        self.world = new_world(self.screen_size)
        self.rng = random.Random() if rng is None else rng
        self.running = True
        self._mouse_down = False
        self.hud = Hud()
        self.home = self._prepared(HomeMenu())
        self.controls = self._prepared(ControlsScreen())
        self.pause_menu = self._prepared(PauseMenu())
        self.game_over_menu = self._prepared(GameOverMenu())

    def _prepared(self, screen):
        """Lay a freshly shown screen out and let it see the current mouse button state."""
        if isinstance(screen, (PauseMenu, GameOverMenu)):
            screen.menu.layout(self.screen_size)
        else:
            screen.layout(self.screen_size)
        # An off-screen pointer touches no button, so this only records the button state
        # and a click that opened the screen cannot press one of its buttons.
        screen.update(_OFF_SCREEN, self._mouse_down, self.states)
        return screen

    def step(
        self,
        delta: float,
        pressed: Container[int],
        just_pressed: Container[int],
        mouse_pos: Tuple[int, int],
        mouse_down: bool,
    ) -> bool:
        """Run one frame of ``delta`` seconds; return whether the application keeps running."""
        states = self.states
        app_state = states.current(AppState)
        game_state = states.current(GameState)
        menu_state = states.current(MainMenuState)

        if menu_state is MainMenuState.HOME:
            self.home.update(mouse_pos, mouse_down, states)
            if self.home.quit_requested or esc_quit(pressed):
                self.running = False
        elif menu_state is MainMenuState.CONTROLS:
            self.controls.update(mouse_pos, mouse_down, states)

        if app_state is AppState.GAME and pygame.K_ESCAPE in just_pressed:
            toggle_pause(states)
        if game_state is GameState.PAUSE:
            self.pause_menu.update(mouse_pos, mouse_down, states)
        if app_state is AppState.GAME_OVER:
            self.game_over_menu.update(mouse_pos, mouse_down, states)

        if game_state is GameState.PLAY:
            self._simulate(delta, pressed, app_state)

        self._mouse_down = mouse_down
        for old, new in states.apply():
            self._exit(old)
            self._enter(new)
        return self.running

    def _simulate(self, delta: float, pressed: Container[int], app_state: AppState) -> None:
        world = self.world
        move_player(world, pressed, delta)
        restrict_player(world)
        regen(world, delta)
        if check_dead(world):
            self.states.request(GameState.NONE)
            self.states.request(AppState.GAME_OVER)

        if app_state is AppState.GAME:
            move_enemies(world, delta)
            restrict_enemies(world)
            attack_player(world, delta)
            spawn_over_time(world, delta, self.rng)
            despawn_dead(world)

        spawn_projectile(world, delta)
        move_projectiles(world, delta)
        hit_targets(world)

        follow_player(world)
        world.camera = restrict_camera(world.camera, world.window_size)
        self.hud.update(world)

    def _enter(self, state: AnyState) -> None:
        if state is AppState.GAME:
            self._start_round()
        elif state is AppState.GAME_OVER:
            self.game_over_menu = self._prepared(GameOverMenu())
        elif state is GameState.PAUSE:
            self.pause_menu = self._prepared(PauseMenu())
        elif state is MainMenuState.HOME:
            self.home = self._prepared(HomeMenu())
        elif state is MainMenuState.CONTROLS:
            self.controls = self._prepared(ControlsScreen())

    def _exit(self, state: AnyState) -> None:
        if state is AppState.GAME:
            self._end_round()

    def _start_round(self) -> None:
        world = self.world
        world.arena = spawn_arena(world.window_size)
        world.player = spawn_player(world.window_size)
        initial_spawn(world, self.rng)
        self.hud = Hud()

    def _end_round(self) -> None:
        world = self.world
        despawn_player(world)
        despawn_enemies(world)
        despawn_projectiles(world)
        world.arena = None

    def draw(self, surface: pygame.Surface) -> None:
        """Render whatever the current states show."""
        app_state = self.states.current(AppState)
        if app_state is AppState.GAME:
            self._draw_world(surface)
            self.hud.draw(surface)
            if self.states.current(GameState) is GameState.PAUSE:
                self.pause_menu.draw(surface)
        elif app_state is AppState.GAME_OVER:
            self.game_over_menu.draw(surface)

        menu_state = self.states.current(MainMenuState)
        if menu_state is MainMenuState.HOME:
            self.home.draw(surface)
        elif menu_state is MainMenuState.CONTROLS:
            self.controls.draw(surface)

    def _draw_world(self, surface: pygame.Surface) -> None:
        world = self.world
        camera = world.camera
        size = surface.get_size()
        surface.fill(BLACK)
        if world.arena is not None:
            world.arena.draw(surface, camera)

        def circle(position, color, diameter) -> None:
            x, y = world_to_screen(position, camera, size)
            pygame.draw.circle(surface, color, (round(x), round(y)), round(diameter / 2.0))

        if world.player is not None:
            circle(world.player.position, PLAYER_COLOR, PLAYER_SPRITE_DIAMETER)
        for enemy in world.enemies:
            circle(enemy.position, ENEMY_COLOR, ENEMY_SPRITE_DIAMETER)
        for shot in world.shots:
            circle(shot.position, PROJECTILE_COLOR, PROJECTILE_SPRITE_DIAMETER)


def _window_size(text: str) -> Tuple[int, int]:
    width, sep, height = text.lower().partition("x")
    try:
        size = (int(width), int(height))
    except ValueError:
        size = None
    if not sep or size is None or size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    return size


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="circlearena", description="Survive the circles chasing you around the arena."
    )
    parser.add_argument(
        "--size",
        type=_window_size,
        default=None,
        metavar="WIDTHxHEIGHT",
        help="play in a window of this size instead of borderless fullscreen",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is quit."""
    args = _parse_args(argv)
    pygame.init()
    try:
        if args.size is not None:
            screen = pygame.display.set_mode(args.size)
        else:
            desktop = pygame.display.get_desktop_sizes()[0]
            screen = pygame.display.set_mode(desktop, pygame.NOFRAME)
        pygame.display.set_caption(CAPTION)
        game = Game(screen.get_size())
        clock = pygame.time.Clock()
        held = set()
        while game.running:
            delta = clock.tick(FPS) / 1000.0
            just_pressed = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    held.add(event.key)
                    just_pressed.add(event.key)
                elif event.type == pygame.KEYUP:
                    held.discard(event.key)
            if not game.running:
                break
            game.step(
                delta,
                held,
                just_pressed,
                pygame.mouse.get_pos(),
                bool(pygame.mouse.get_pressed()[0]),
            )
            game.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0