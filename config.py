"""
Game metadata
"""

GAME_TITLE = "Press the Button"
GAME_VERSION = "1.0.0"
