GRID_ROWS = 15
GRID_COLUMNS = 30
# Seconds between two ticks.
TICK_INTERVAL = 1.0
MAX_FOOD_AMOUNT = 15
# Seconds the final board stays on screen after the game is over.
GAME_OVER_DELAY = 3.0

START_MESSAGE = "Start"
TICK_MESSAGE = "Iteration {tick}"
GAME_OVER_MESSAGE = "Game is over"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
