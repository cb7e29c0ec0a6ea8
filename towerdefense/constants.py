"""Game-wide tuning values."""

GRID_WIDTH = 40
GRID_HEIGHT = 20
FRAMERATE = 10
# Seconds between frames.
FRAME_DURATION = (1000 // FRAMERATE) / 1000
# Milliseconds between tower shots.
RATE_OF_FIRE = 1 * (1000 // FRAMERATE)
ENEMY_RANGE = 10
MINIMUM_ENEMY_POOL_SIZE = 5
ENEMY_SPAWN_BULK_SIZE = 10
ENEMY_MAX_SPEED = 5
# Seconds between enemy spawns.
ENEMY_SPAWN_INTERVAL = 5