"""
Space Game Constants
"""

import os

WIDTH = 480
HEIGHT = 720

# Milliseconds between two ticks (~30 frames per second)
TICK_MS = 33

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

ASSETS_DIR = os.path.join(BASE_DIR, "..", "assets")

PLAYER_SPEED = 4
PLAYER_HEALTH = 100
FIRE_COOLDOWN = 10  # ticks between two shots

ADVERSARY_SPEED = 5
PLAYER_PROJECTILE_SPEED = -10
ADVERSARY_PROJECTILE_SPEED = 10
BACKGROUND_DRIFT = 0.5

# One in SPAWN_ODDS per tick, for adversary spawns and adversary shots
SPAWN_ODDS = 61

RAM_DAMAGE = 10
RAM_POINTS = 10
SHOT_DOWN_POINTS = 10
INTERCEPT_POINTS = 1
HIT_DAMAGE = 5
HIT_POINTS = 1

# Default (width, height) of each visual, used when no image is loaded
FOOTPRINTS = {
    "player": (64, 64),
    "adversary": (48, 48),
    "player_projectile": (6, 16),
    "adversary_projectile": (6, 16),
    "background": (WIDTH, HEIGHT),
}

TITLE_CAPTION = "Space Game"
GAME_OVER_CAPTION = "Game Over"
