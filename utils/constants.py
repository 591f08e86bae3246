"""
Global constants for Press the Button
"""

# Playfield settings
PLAYFIELD_WIDTH = 900
PLAYFIELD_HEIGHT = 540
FPS = 60

# HUD panel height (under the playfield)
PANEL_H = 48

# Timing: dt is measured in nominal frames
FRAME_MS = 1000.0 / 60.0
MAX_FRAME_DELTA = 3.0

# Levels
LEVEL_DODGE = 1
LEVEL_MAZE = 2
LEVEL_FLEE = 3
LEVEL_COUNT = 3

# Player settings
PLAYER_SPAWN = (60, 60)
PLAYER_RADIUS = 12
PLAYER_SPEED = 3.0
PLAYER_SPRITE_SIZE = 32

# Button settings
BUTTON_WIDTH = 120
BUTTON_HEIGHT = 44
BUTTON_SPAWN_OFFSET = (180, 90)        # from bottom-right corner, levels 1-2
BUTTON_FLEE_SPAWN_OFFSET = (220, 120)  # from bottom-right corner, level 3
ADVANCE_DELAY_MS = 600

# Level 1: hazards (stars)
HAZARD_COUNT = 8
HAZARD_SIZE = 28
HAZARD_SPEED_MIN = 0.6
HAZARD_SPEED_RANGE = 1.5
HAZARD_HIT_FACTOR = 0.35
HAZARD_SPAWN_MARGIN = (180, 120)  # left, top
HAZARD_SPAWN_SPAN_TRIM = (260, 180)

# Level 2: maze
MAZE_COLS = 30
MAZE_ROWS = 18
MAZE_SPAWN_CELL = (1, 1)
MAZE_SPEED_MULTIPLIER = 0.9
MAZE_BARRIER_COUNT = 4
MAZE_BARRIER_STEP = 3
MAZE_BARRIER_END_COL = 26
MAZE_BARRIER_END_ROW = 14

WALL = 1
OPEN = 0

# Level 3: fleeing button
FLEE_RADIUS = 120.0
FLEE_SPEED = 9.6
FLEE_MARGIN = 10

# Status lines
STATUS_MESSAGES = {
    LEVEL_DODGE: "Dodge the stars and press the button.",
    LEVEL_MAZE: "Find the path through the maze and press the button.",
    LEVEL_FLEE: "The button runs away. Corner it!",
}
STATUS_LEVEL_COMPLETE = "Level complete!"
STATUS_WIN = "You win!"

# Audio: (frequency Hz, duration ms, volume)
AUDIO_SAMPLE_RATE = 22050
CUE_TONES = {
    'hazard_collision': (220, 120, 0.08),
    'level_complete': (880, 120, 0.08),
    'win': (990, 150, 0.08),
    'ui_toggle': (880, 60, 0.06),
    'restart': (440, 80, 0.08),
}
