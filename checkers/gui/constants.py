from __future__ import annotations

from checkers.types import BOARD_SIZE as BOARD_SQUARES

# Board appearance
BOARD_BG_LIGHT = "#E7D7B8"   # light square
BOARD_BG_DARK  = "#6B4F3A"   # dark/playable square
BOARD_HL_SQ    = "#F6F669"   # selected square highlight
BOARD_HL_DEST  = "#9AE66E"   # destination highlight
BOARD_LASTMOVE = "#F1C40F"   # last move highlight path
BOARD_FORCED   = "#E67E22"   # piece that must keep jumping

# Piece appearance
PIECE_BLACK_FILL = "#222222"
PIECE_BLACK_OUTLINE = "#FFFFFF"
PIECE_RED_FILL   = "#C0392B"
PIECE_RED_OUTLINE = "#FFFFFF"
KING_TEXT_COLOR = "#FFD700"  # gold-ish

# Layout
SQUARE_SIZE = 72   # default pixels per square, overridden by UISettings.square_size

# UI Fonts
FONT_TITLE = ("Segoe UI", 18, "bold")
FONT_NORMAL = ("Segoe UI", 11, "bold")
FONT_LABEL = ("Segoe UI", 10, "bold")
FONT_BUTTON = ("Segoe UI", 10)
FONT_COORD = ("Segoe UI", 8)

# Colors for text and UI elements
TEXT_COLOR_NORMAL = "#000000"
TEXT_COLOR_DISABLED = "#888888"

# Captured-piece tray and computer move feedback
CAPTURED_MAN_GLYPH = "●"
CAPTURED_KING_GLYPH = "K"
AI_HIGHLIGHT_MS = 400
