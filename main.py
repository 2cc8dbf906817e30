"""
main.py — Entry point and game loop for RPSrush.

Responsibilities:
    - Configure logging and initialise pygame
    - Build the RoundState, LogicalClock, RoundEngine and Game
    - Run the main loop: handle events → advance clock → render → flip
    - Stop the engine's clock callbacks before pygame shuts down

Architecture note:
    main.py is intentionally thin. All rules live in core/engine.py and
    the only source of time for them is clock.advance(dt) below.

pygbag compatibility:
    The game loop is wrapped in an async function and driven by
    asyncio.run(). pygbag replaces asyncio with its own event loop
    that yields to the browser each frame.

Usage (local):
    python main.py

Usage (WASM export):
    pygbag main.py
"""

import asyncio
import logging
import random

import pygame
from settings import SCREEN_W, SCREEN_H, FPS, TITLE, LOG_LEVEL
from core.clock import LogicalClock
from core.engine import RoundEngine
from core.game import Game
from core.state import RoundState

logger = logging.getLogger(__name__)

_WINDOW_SCALE = 2


async def main() -> None:
    """Async main loop, compatible with both CPython and pygbag WASM."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()

    window = pygame.display.set_mode((SCREEN_W * _WINDOW_SCALE, SCREEN_H * _WINDOW_SCALE))
    pygame.display.set_caption(TITLE)

    # Native resolution surface — all game rendering targets this
    game_surface = pygame.Surface((SCREEN_W, SCREEN_H))

    # ── Subsystems ────────────────────────────────────────────────────────────
    rng    = random.Random()
    state  = RoundState.initial(rng)
    clock  = LogicalClock()
    engine = RoundEngine(clock, state, rng)
    game   = Game(engine)
    frames = pygame.time.Clock()

    game.on_view_appeared()
    logger.info("first round: opposing=%s target=%s",
                state.opposing_move.label, state.target_outcome.label)

    running = True
    while running:
        dt = frames.tick(FPS) / 1000.0   # seconds since last frame
        dt = min(dt, 0.05)               # clamp to 50ms — prevents spiral on tab switch

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                # window is an integer multiple of the native surface
                pos = (event.pos[0] // _WINDOW_SCALE, event.pos[1] // _WINDOW_SCALE)
                translated = pygame.event.Event(event.type, {**event.dict, "pos": pos})
                game.handle_event(translated)
            else:
                game.handle_event(event)

        clock.advance(dt)

        game.render(game_surface)
        pygame.transform.scale(game_surface, window.get_size(), window)
        pygame.display.flip()

        await asyncio.sleep(0)

    game.on_view_disappeared()
    pygame.quit()


if __name__ == "__main__":
    asyncio.run(main())
