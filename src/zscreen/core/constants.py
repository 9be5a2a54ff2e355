"""Shared constants for the screen model."""

# Screen size reported to the engine in its header
SCREEN_COLS = 80
SCREEN_ROWS = 25

# Window ids
LOWER_WINDOW = 0
UPPER_WINDOW = 1

# ClearScreen targets: -1 clears everything and unsplits, -2 clears
# everything but keeps the split (treated the same here)
CLEAR_ALL = -1
CLEAR_ALL_KEEP_SPLIT = -2

# Interpreter capability flags (Flags 1): colour, bold, italic,
# fixed-pitch, timed input
FLAG_COLOR = 1
FLAG_BOLD = 4
FLAG_ITALIC = 8
FLAG_FIXED = 16
FLAG_TIMED = 128
CAPABILITY_FLAGS = FLAG_COLOR | FLAG_BOLD | FLAG_ITALIC | FLAG_FIXED | FLAG_TIMED

# ZSCII codes for special keys
ZSCII_DELETE = 8
ZSCII_NEWLINE = '\n'
ZSCII_ESCAPE = 27
ZSCII_UP = 129
ZSCII_DOWN = 130
ZSCII_LEFT = 131
ZSCII_RIGHT = 132

GAME_OVER_BANNER = "\n*** GAME OVER ***\n"
