"""
core/game.py — Presentation adapter for RPSrush.

Game sits between pygame and RoundEngine. It owns no game rules; it
translates input and view lifecycle into engine calls and draws engine
snapshots through renderer/ui.py.

Events into the core:
    on_move_selected(move)   — a move button was clicked or 1/2/3 pressed
    on_view_appeared()       — window shown or restored, countdown runs
    on_view_disappeared()    — window minimised or closing, clock stops
    on_restart_requested()   — Restart clicked or R pressed on the final dialog

pygame mapping (handle_event):
    MOUSEBUTTONDOWN (left) on a move button     → on_move_selected
    KEYDOWN 1 / 2 / 3                            → on_move_selected
    MOUSEBUTTONDOWN on Restart, or KEYDOWN R     → on_restart_requested
    WINDOWMINIMIZED / WINDOWRESTORED             → view disappeared / appeared

game.py does NOT call pygame.display.flip() or advance the clock.
That is main.py's responsibility.
"""

from __future__ import annotations
import logging
import pygame

from core.engine import RoundEngine
from core.moves import Move
from core.state import RoundSnapshot
from renderer import ui

logger = logging.getLogger(__name__)


class Game:
    """Routes pygame input into a RoundEngine and renders its state.

    Attributes:
        engine:       The RoundEngine being presented.
        _move_rects:  Move button rects for hit detection.
        _restart_rect: Restart button rect, set while the final dialog shows.
    """

    def __init__(self, engine: RoundEngine) -> None:
        self.engine: RoundEngine = engine
        self._move_rects: dict[Move, pygame.Rect] = ui.move_button_rects()
        self._restart_rect: pygame.Rect = ui.restart_button_rect()

    # ── Events into the core ──────────────────────────────────────────────────

    def on_move_selected(self, move: Move) -> None:
        self.engine.select(move)

    def on_view_appeared(self) -> None:
        logger.debug("view appeared")
        self.engine.start()

    def on_view_disappeared(self) -> None:
        logger.debug("view disappeared")
        self.engine.stop()

    def on_restart_requested(self) -> None:
        self.engine.restart()

    def snapshot(self) -> RoundSnapshot:
        return self.engine.snapshot()

    # ── pygame input ──────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route a single pygame event.

        While the final dialog is up only restart input is handled; the
        engine would ignore move input anyway.

        Args:
            event: A pygame event with pos in native game coordinates.
        """
        if event.type == pygame.WINDOWMINIMIZED:
            self.on_view_disappeared()
            return
        if event.type == pygame.WINDOWRESTORED:
            self.on_view_appeared()
            return

        if self.engine.state.game_over:
            self._handle_final_event(event)
        else:
            self._handle_playing_event(event)

    def _handle_playing_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for move, rect in self._move_rects.items():
                if rect.collidepoint(event.pos):
                    self.on_move_selected(move)
                    return

        elif event.type == pygame.KEYDOWN:
            move = Move.from_key(event.key - pygame.K_0)
            if move is not None:
                self.on_move_selected(move)

    def _handle_final_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._restart_rect.collidepoint(event.pos):
                self.on_restart_requested()

        elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.on_restart_requested()

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current snapshot onto the game surface.

        Args:
            surface: Native 360x640 pygame Surface. Written to each frame.
        """
        snap = self.snapshot()
        self._move_rects = ui.draw_screen(surface, snap)
        if snap.game_over:
            self._restart_rect = ui.draw_final_judge(surface, snap.score)
