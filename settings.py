"""
settings.py — Global constants for RPSrush.

All magic numbers live here. No other module should hardcode colors,
dimensions, or timing values. Import what you need with:
    from settings import COLOR, SCREEN_W, ...
"""

import os

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 360
SCREEN_H = 640
FPS = 60
TITLE = "Rock Paper Scissor"

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "background":   (242, 242, 247),   # #F2F2F7
    "card":         (229, 229, 234),   # #E5E5EA — move / choice circles
    "card_border":  (199, 199, 204),   # #C7C7CC
    "ring_track":   (220, 220, 224),   # countdown ring background
    "indigo":       ( 88,  86, 214),   # #5856D6 — more than half the time left
    "urgent":       (255,  59,  48),   # #FF3B30 — half the time or less
    "text":         ( 28,  28,  30),   # #1C1C1E
    "text_light":   (255, 255, 255),
    "muted":        (142, 142, 147),   # #8E8E93
    "opposing":     ( 52, 199,  89),   # opposing move label
    "correct":      ( 52, 199,  89),   # #34C759 — green feedback
    "wrong":        (255,  59,  48),   # red feedback
    "dim":          ( 28,  28,  30),   # final dialog backdrop (alpha applied)
}

# ── Timing ────────────────────────────────────────────────────────────────────
ROUND_SECONDS  = 10   # countdown per round
REVEAL_SECONDS = 3    # feedback window after a selection
TICK_SECONDS   = 1    # countdown granularity
MAX_ROUNDS     = 10   # rounds per game

# ── Layout (relative to 360×640) ──────────────────────────────────────────────
TITLE_Y        = 24
CARD_SIZE      = 100   # px — opposing move / target outcome circles
CARD_Y         = 110
RING_SIZE      = 100   # px — countdown ring diameter
RING_WIDTH     = 12
RING_Y         = 280
MOVE_BTN_SIZE  = 88    # px — selectable move circles
MOVE_BTN_GAP   = 15
MOVE_BTN_Y     = 450
DIALOG_W       = 280
DIALOG_H       = 180
DIALOG_BTN_H   = 44

# ── Fonts ─────────────────────────────────────────────────────────────────────
FONT_FAMILY  = "helvetica"
FONT_SIZE_XL = 30
FONT_SIZE_LG = 22
FONT_SIZE_MD = 16
FONT_SIZE_SM = 13

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("RPSRUSH_LOG_LEVEL", "INFO").upper()
