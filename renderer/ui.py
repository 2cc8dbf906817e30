"""
renderer/ui.py — Screen rendering for RPSrush.

Draws every element of the single game screen:
    - Title
    - Opposing move and target outcome cards
    - Countdown ring (indigo above half time, red at half or below)
    - Move buttons, tinted green/red once a move is selected
    - Feedback line and answered-question count / score
    - "Your final judge" dialog with the Restart button

All functions are stateless: they take explicit data arguments and draw
to the provided surface. Layout helpers (move_button_rects,
restart_button_rect) are pure so core/game.py can hit-test without
rendering first.

Coordinate system: native 360x640 game space.
"""

import math
import pygame
from core.moves import Move, Outcome
from core.state import RoundSnapshot
from settings import (
    SCREEN_W, SCREEN_H,
    COLOR, TITLE,
    TITLE_Y, CARD_SIZE, CARD_Y,
    RING_SIZE, RING_WIDTH, RING_Y,
    MOVE_BTN_SIZE, MOVE_BTN_GAP, MOVE_BTN_Y,
    DIALOG_W, DIALOG_H, DIALOG_BTN_H,
    FONT_FAMILY, FONT_SIZE_XL, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_SM,
)


# ── Font cache ────────────────────────────────────────────────────────────────
_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    """Return a cached font at the given size.

    pygame.font.SysFont falls back to the default font if FONT_FAMILY is
    missing on the system.
    """
    if size not in _fonts:
        _fonts[size] = pygame.font.SysFont(FONT_FAMILY, size)
    return _fonts[size]


def _blit_centered(surface: pygame.Surface, text: str, size: int,
                   color: tuple, cx: int, y: int) -> pygame.Rect:
    label = _font(size).render(text, True, color)
    return surface.blit(label, (cx - label.get_width() // 2, y))


# ── Layout ────────────────────────────────────────────────────────────────────

def move_button_rects() -> dict[Move, pygame.Rect]:
    """Return the hit rect of each move button, in Move order.

    Returns:
        Mapping of Move to pygame.Rect in native game coordinates.
    """
    moves = list(Move)
    total_w = len(moves) * MOVE_BTN_SIZE + (len(moves) - 1) * MOVE_BTN_GAP
    x0 = (SCREEN_W - total_w) // 2
    return {
        move: pygame.Rect(x0 + i * (MOVE_BTN_SIZE + MOVE_BTN_GAP), MOVE_BTN_Y,
                          MOVE_BTN_SIZE, MOVE_BTN_SIZE)
        for i, move in enumerate(moves)
    }


def restart_button_rect() -> pygame.Rect:
    """Return the Restart button rect of the final dialog."""
    dialog = _dialog_rect()
    margin = 20
    return pygame.Rect(dialog.x + margin, dialog.bottom - DIALOG_BTN_H - margin,
                       dialog.w - margin * 2, DIALOG_BTN_H)


def _dialog_rect() -> pygame.Rect:
    return pygame.Rect((SCREEN_W - DIALOG_W) // 2, (SCREEN_H - DIALOG_H) // 2,
                       DIALOG_W, DIALOG_H)


# ── Title ─────────────────────────────────────────────────────────────────────

def draw_title(surface: pygame.Surface) -> None:
    _blit_centered(surface, TITLE, FONT_SIZE_XL, COLOR["text"], SCREEN_W // 2, TITLE_Y)


# ── Round cards ───────────────────────────────────────────────────────────────

def _draw_card(surface: pygame.Surface, cx: int, heading: str,
               glyph: str, caption: str, caption_color: tuple) -> None:
    """Draw one heading + circle + caption column.

    The circle shows the first letter of the caption; emoji glyphs are not
    reliably available in system fonts.
    """
    _blit_centered(surface, heading, FONT_SIZE_MD, COLOR["text"], cx, CARD_Y - 34)
    center = (cx, CARD_Y + CARD_SIZE // 2)
    pygame.draw.circle(surface, COLOR["card"], center, CARD_SIZE // 2)
    pygame.draw.circle(surface, COLOR["card_border"], center, CARD_SIZE // 2, 1)
    letter = _font(FONT_SIZE_XL * 2).render(glyph, True, caption_color)
    surface.blit(letter, (center[0] - letter.get_width() // 2,
                          center[1] - letter.get_height() // 2))
    _blit_centered(surface, caption, FONT_SIZE_MD, caption_color, cx, CARD_Y + CARD_SIZE + 8)


def draw_round_cards(surface: pygame.Surface, opposing: Move, target: Outcome) -> None:
    """Draw the "Current Move" and "Current Choice" cards side by side.

    Args:
        surface:  Native-resolution game surface.
        opposing: The move to answer against.
        target:   Whether the player must win or lose against it.
    """
    quarter = SCREEN_W // 4
    _draw_card(surface, quarter, "Current Move",
               opposing.label[0], opposing.label, COLOR["opposing"])
    _draw_card(surface, SCREEN_W - quarter, "Current Choice",
               target.label[0], target.label, COLOR["text"])


# ── Countdown ring ────────────────────────────────────────────────────────────

def countdown_color(time_remaining: int, total: int) -> tuple:
    """Indigo while more than half the time is left, red afterwards."""
    return COLOR["indigo"] if time_remaining > total // 2 else COLOR["urgent"]


def draw_countdown(surface: pygame.Surface, time_remaining: int,
                   total: int, fill: float) -> None:
    """Draw the circular countdown with the seconds left in the middle.

    The arc starts at twelve o'clock and shrinks as time runs out.

    Args:
        surface:        Native-resolution game surface.
        time_remaining: Whole seconds left, drawn as text.
        total:          Round length, used for the color threshold.
        fill:           Remaining time ratio in [0.0, 1.0].
    """
    rect = pygame.Rect((SCREEN_W - RING_SIZE) // 2, RING_Y, RING_SIZE, RING_SIZE)
    color = countdown_color(time_remaining, total)

    pygame.draw.circle(surface, COLOR["ring_track"], rect.center, RING_SIZE // 2, RING_WIDTH)
    if fill > 0.0:
        start = math.pi / 2
        pygame.draw.arc(surface, color, rect, start, start + 2 * math.pi * fill, RING_WIDTH)

    digits = _font(FONT_SIZE_XL).render(str(time_remaining), True, color)
    surface.blit(digits, (rect.centerx - digits.get_width() // 2,
                          rect.centery - digits.get_height() // 2))


# ── Move buttons ──────────────────────────────────────────────────────────────

def draw_move_buttons(surface: pygame.Surface, selected: Move | None,
                      correct: bool | None) -> dict[Move, pygame.Rect]:
    """Draw the three selectable moves and return their rects.

    The selected button gets a green background when the judgment was
    correct and red otherwise. Unselected buttons are greyed out once a
    selection exists, mirroring the disabled state of the input.

    Returns:
        Mapping of Move to pygame.Rect for hit detection.
    """
    _blit_centered(surface, "Select your Move", FONT_SIZE_LG, COLOR["text"],
                   SCREEN_W // 2, MOVE_BTN_Y - 40)

    rects = move_button_rects()
    for move, rect in rects.items():
        if move is selected:
            pygame.draw.rect(surface, COLOR["correct"] if correct else COLOR["wrong"],
                             rect, border_radius=12)
        pygame.draw.circle(surface, COLOR["card"], rect.center, rect.w // 2 - 6)

        text_color = COLOR["muted"] if selected is not None and move is not selected else COLOR["text"]
        label = _font(FONT_SIZE_MD).render(move.label, True, text_color)
        surface.blit(label, (rect.centerx - label.get_width() // 2,
                             rect.centery - label.get_height() // 2))
    return rects


# ── Feedback and score ────────────────────────────────────────────────────────

def draw_feedback(surface: pygame.Surface, text: str, correct: bool | None) -> None:
    if not text:
        return
    color = COLOR["correct"] if correct else COLOR["wrong"]
    _blit_centered(surface, text, FONT_SIZE_MD, color, SCREEN_W // 2,
                   MOVE_BTN_Y + MOVE_BTN_SIZE + 12)


def score_color(score: int) -> tuple:
    if score > 0:
        return COLOR["correct"]
    if score < 0:
        return COLOR["wrong"]
    return COLOR["text"]


def draw_score(surface: pygame.Surface, question_count: int, score: int) -> None:
    """Draw the answered-question count and the colored score at the bottom."""
    y = SCREEN_H - 80
    _blit_centered(surface, f"Answered question count: {question_count}",
                   FONT_SIZE_SM, COLOR["text"], SCREEN_W // 2, y)

    prefix = _font(FONT_SIZE_LG).render("Your score is: ", True, COLOR["text"])
    value = _font(FONT_SIZE_LG).render(str(score), True, score_color(score))
    x = (SCREEN_W - prefix.get_width() - value.get_width()) // 2
    surface.blit(prefix, (x, y + 26))
    surface.blit(value, (x + prefix.get_width(), y + 26))


# ── Final dialog ──────────────────────────────────────────────────────────────

def draw_final_judge(surface: pygame.Surface, score: int) -> pygame.Rect:
    """Draw the end-of-game dialog and return the Restart button rect.

    Args:
        surface: Native-resolution game surface.
        score:   Final score to display.

    Returns:
        pygame.Rect of the Restart button for hit detection.
    """
    overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    overlay.fill((*COLOR["dim"], 140))
    surface.blit(overlay, (0, 0))

    dialog = _dialog_rect()
    pygame.draw.rect(surface, COLOR["background"], dialog, border_radius=14)

    _blit_centered(surface, "Your final judge", FONT_SIZE_LG, COLOR["text"],
                   dialog.centerx, dialog.y + 22)
    _blit_centered(surface, f"Your final score is: {score}", FONT_SIZE_MD,
                   COLOR["text"], dialog.centerx, dialog.y + 62)

    btn = restart_button_rect()
    pygame.draw.rect(surface, COLOR["indigo"], btn, border_radius=10)
    label = _font(FONT_SIZE_MD).render("Restart", True, COLOR["text_light"])
    surface.blit(label, (btn.centerx - label.get_width() // 2,
                         btn.centery - label.get_height() // 2))
    return btn


def draw_screen(surface: pygame.Surface, snap: RoundSnapshot) -> dict[Move, pygame.Rect]:
    """Draw the full game screen for a snapshot.

    Returns:
        The move button rects drawn this frame.
    """
    surface.fill(COLOR["background"])
    draw_title(surface)
    draw_round_cards(surface, snap.opposing_move, snap.target_outcome)
    draw_countdown(surface, snap.time_remaining, snap.round_seconds, snap.time_fraction())
    rects = draw_move_buttons(surface, snap.selected_move, snap.last_round_correct)
    draw_feedback(surface, snap.feedback, snap.last_round_correct)
    draw_score(surface, snap.question_count, snap.score)
    return rects
