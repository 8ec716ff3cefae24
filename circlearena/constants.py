"""Tunable sizes, speeds and colours of the game."""

ARENA_WIDTH = 2000.0
ARENA_HEIGHT = 1600.0
ARENA_SPRITE_DEPTH = 0.0
ARENA_TILE_WIDTH = 1000.0
ARENA_TILE_HEIGHT = 800.0

CAMERA_ARENA_WIDTH_OFFSET = 40.0
CAMERA_ARENA_HEIGHT_OFFSET = 40.0
CAMERA_DEPTH = 0.0

ENEMY_SPEED = 200.0
ENEMY_SPRITE_DIAMETER = 50.0
ENEMY_SPRITE_DEPTH = 20.0
ENEMY_ATTACK_SPEED = 0.5  # attacks per second
ENEMY_INITIAL_AMOUNT = 10
ENEMY_SPAWN_DELAY = 0.5  # seconds
SPAWN_AROUND_PLAYER_RADIUS = 200.0
ENEMY_DAMAGE = 25.0
ENEMY_INITIAL_HEALTH = 100.0

PLAYER_SPEED = 350.0
PLAYER_SPRITE_DEPTH = 10.0
PLAYER_SPRITE_DIAMETER = 50.0
PLAYER_INITIAL_HEALTH = 100.0
PLAYER_HEALTH_REGEN = 2.0  # per second

PROJECTILE_CAST_SPEED = 3.95  # casts per second
PROJECTILE_SPEED = 500.0
PROJECTILE_SPRITE_DIAMETER = 10.0
PROJECTILE_SPRITE_DEPTH = 30.0
PROJECTILE_DURATION = 2.0
PROJECTILE_DAMAGE = 50.0

HEALTH_BAR_LENGTH = 200.0

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (128, 128, 128)
GRAY_500 = (107, 114, 128)
GRAY_700 = (55, 65, 81)
GREEN_500 = (34, 197, 94)
RED_500 = (239, 68, 68)

GROUND_COLOR = (96, 128, 64)
GROUND_LINE_COLOR = (80, 108, 52)
PLAYER_COLOR = (40, 90, 220)
ENEMY_COLOR = (220, 40, 40)
PROJECTILE_COLOR = BLACK