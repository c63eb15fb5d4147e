"""Mirror Canvas: play mirrorline with pygame.

Draw with the left mouse button from the green node to the red one, touching
every blue node on the way. Whatever you draw in the upper field is mirrored
through the centre into the lower field, and both must stay clear of blocks.

Controls:
  Left-click  Start / resume, hold and drag to draw
  REPLY       Hold (button or R key) to answer a message
  PAUSE       Pause / resume (button or Space)
  Escape      Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from mirrorline import Engine, Game, InputBuffer, make_render_system, make_update_system
from mirrorline.data import MESSAGES, STAGES
from ui.constants import DEFAULT_CANVAS_H, DEFAULT_CANVAS_W, FPS, LOG_H, SIDEBAR_W
from ui.log_panel import MessageLogPanel
from ui.sidebar import button_rects, draw_sidebar
from ui.surface import PygameSurface


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Mirror Canvas, mirrorline pygame front-end")
    p.add_argument("--width", type=int, default=DEFAULT_CANVAS_W, help="Canvas width (default: 600)")
    p.add_argument("--height", type=int, default=DEFAULT_CANVAS_H, help="Canvas height (default: 400)")
    p.add_argument("--tps", type=int, default=None, help="Ticks per second (default: 20)")
    p.add_argument("--stage", type=int, default=0, help="Starting stage index (default: 0)")
    args = p.parse_args()
    args.width = max(200, min(1600, args.width))
    args.height = max(200, min(1200, args.height))
    return args


def main() -> None:
    args = parse_args()
    canvas_w, canvas_h = args.width, args.height
    screen_w = canvas_w + SIDEBAR_W
    screen_h = canvas_h + LOG_H

    game = Game(canvas_w, canvas_h, STAGES, MESSAGES, stage_index=args.stage)
    inputs = InputBuffer()

    pygame.init()
    screen = pygame.display.set_mode((screen_w, screen_h))
    pygame.display.set_caption("Mirror Canvas")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    log_panel = MessageLogPanel()
    surface = PygameSurface(canvas_w, canvas_h, log_panel)

    engine = Engine(game, tps=args.tps)
    engine.add_system(make_update_system(inputs))
    engine.add_system(make_render_system(surface))

    buttons = button_rects(canvas_w, SIDEBAR_W)
    canvas_rect = pygame.Rect(0, 0, canvas_w, canvas_h)
    reply_held = False

    tick_interval = engine.clock.dt
    accumulator = 0.0
    running = True

    while running:
        accumulator += clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    inputs.pause_click()
                elif event.key == pygame.K_r:
                    reply_held = True
                    inputs.reply_down()

            elif event.type == pygame.KEYUP:
                if event.key == pygame.K_r:
                    reply_held = False
                    inputs.reply_up()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if canvas_rect.collidepoint(event.pos):
                    inputs.click()
                    inputs.pointer_down()
                elif buttons["reply"].collidepoint(event.pos):
                    reply_held = True
                    inputs.reply_down()
                elif buttons["pause"].collidepoint(event.pos):
                    inputs.pause_click()

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                inputs.pointer_up()
                if reply_held:
                    reply_held = False
                    inputs.reply_up()

            elif event.type == pygame.MOUSEMOTION:
                if canvas_rect.collidepoint(event.pos):
                    inputs.pointer_move(*event.pos)

        # --- Tick engine at fixed rate ---
        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval
        # Drain excess accumulator to prevent spiral of death
        if accumulator > tick_interval * 4:
            accumulator = tick_interval * 2

        # --- Present ---
        screen.blit(surface.canvas, (0, 0))
        draw_sidebar(screen, font, canvas_w, SIDEBAR_W, canvas_h, reply_held, game.reply_count)
        log_panel.draw(screen, font, 0, canvas_h, screen_w, LOG_H)
        pygame.display.flip()

    pygame.quit()

    counts = game.events.counts()
    print(
        f"Reached stage {game.stage_index}, total score {game.score.total}, "
        f"{game.reply_count} replies, {counts['line_reset']} line resets"
    )
    sys.exit()


if __name__ == "__main__":
    main()
