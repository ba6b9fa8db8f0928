import argparse
import logging

import pygame

from tetris_config import CONFIG
from tetris_events import LOCK, LINE_CLEAR, START, LogAudioSink
from tetris_game import Game
from tetris_input import QUIT, action_for, dispatch
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Neon Tetris")
    p.add_argument("--seed", type=int, default=None, help="seed the piece generator")
    p.add_argument("--rows", type=int, default=CONFIG["ROWS"], help="board rows (default: %(default)s)")
    p.add_argument("--cols", type=int, default=CONFIG["COLS"], help="board columns (default: %(default)s)")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="cell size in pixels")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: INFO)",
    )
    args = p.parse_args(argv)
    if args.rows < 4 or args.cols < 4:
        p.error("board must be at least 4x4")
    if args.cell_size <= 0:
        p.error("--cell-size must be positive")
    return args


def apply_args(args):
    CONFIG["ROWS"] = args.rows
    CONFIG["COLS"] = args.cols
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["SEED"] = args.seed


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(game: Game):
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims(game.rows, game.cols)
    screen = recreate_window(dims)
    pygame.display.set_caption("Neon Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font)
    overlay = Overlay(big_font, font)
    audio = LogAudioSink()
    clock = pygame.time.Clock()
    render.rebuild_board_surface(game.board)

    while True:
        dt = clock.tick(CONFIG["FPS"])
        events = []

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return
            if e.type == pygame.KEYDOWN:
                action = action_for(e.key)
                if action == QUIT:
                    return
                events.extend(dispatch(game, action))

        events.extend(game.update(dt))
        audio.consume(events)
        # locked blocks only change on lock, clear or reset
        if any(ev.kind in (LOCK, LINE_CLEAR, START) for ev in events):
            render.rebuild_board_surface(game.board)

        s = game.session
        render.redraw_static(screen)
        render.blit_board_surface(screen)
        if game.playing:
            render.draw_piece(screen, game.current)
        render.draw_panel_hud(screen, s.score, s.level, s.lines, game.next)
        overlay.draw(screen, s.state, dims, s.score)
        pygame.display.flip()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    apply_args(args)
    game = Game(seed=CONFIG["SEED"])
    log.info("seed=%s board=%dx%d", CONFIG["SEED"], game.rows, game.cols)
    try:
        run(game)
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
