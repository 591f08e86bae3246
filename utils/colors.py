"""
Color palette for Press the Button (coffeehouse vibe)
"""

# Background colors
COLOR_BG = (245, 239, 230)        # Playfield background
COLOR_GRID = (232, 226, 218)      # Faint background grid
COLOR_SQUIGGLE = (226, 220, 213)  # Aroma lines
COLOR_PANEL_BG = (255, 250, 243)  # HUD panel

# Text colors
COLOR_INK = (43, 36, 31)          # Outlines and normal text
COLOR_TEXT_DIM = (110, 102, 95)   # Hints

# Entity colors
COLOR_PLAYER = (107, 125, 92)           # Sage
COLOR_PLAYER_HIGHLIGHT = (134, 160, 119)
COLOR_STAR = (160, 109, 90)             # Terracotta
COLOR_BUTTON = (199, 163, 73)           # Gold
COLOR_BUTTON_PRESSED = (134, 160, 119)

# Maze colors
COLOR_MAZE_WALL = (241, 231, 215)
COLOR_MAZE_WALL_EDGE = (180, 172, 165)

# Accent
COLOR_ACCENT = (141, 85, 36)
