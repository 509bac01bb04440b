"""Game configuration defaults."""

# Map dimensions
MAP_WIDTH = 50
MAP_HEIGHT = 50

# Planet configuration
PLANET_COUNT = 10
INITIAL_SHIPS = 5  # Garrison of every planet at game start
GROWTH_PER_TURN = 1  # Ships gained by player-owned planets each round

# Game length
MAX_TURNS = 200
