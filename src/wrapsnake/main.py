# main.py
from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .config import Config
from .policies import POLICIES
from .scheduler import FrameLoop
from .session import Session

logger = logging.getLogger(__name__)


# --------------------------
# Interactive (pygame) loop
# --------------------------
def run_window(cfg: Config) -> int:
    import pygame  # type: ignore

    from .keys import intent_for_key
    from .render import draw_frame

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((cfg.width_px, cfg.height_px))
    pygame.display.set_caption("Snake (walls wrap)")

    session = Session(cfg)
    loop: Optional[FrameLoop] = None

    def on_frame(now_ms: int) -> None:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                loop.stop()
                return
            if event.type == pygame.KEYDOWN:
                session.send(intent_for_key(event.key))
        # 2) update (gated on speed inside the scheduler)
        session.on_frame(now_ms)
        # 3) render the latest state every frame
        draw_frame(screen, font, session.state, cfg)
        pygame.display.flip()

    loop = FrameLoop(on_frame, clock=pygame.time.get_ticks, sleep=lambda s: pygame.time.wait(int(s * 1000)), fps=cfg.fps)
    try:
        loop.start()
    finally:
        session.close()
        pygame.quit()
    return session.state.score


# --------------------------
# Headless loop
# --------------------------
def run_headless(cfg: Config, policy: str, ticks: int, rng: Optional[random.Random] = None) -> Session:
    """
    Drive a session with an autopilot and synthetic timestamps, one tick per
    frame, until the game ends or `ticks` ticks have run.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    choose = POLICIES[policy]
    rng = rng if rng is not None else random.Random(cfg.seed)
    session = Session(cfg, rng=rng)

    now = 0
    while session.tick_count < ticks and not session.state.is_over:
        session.send(choose(session.state, cfg, rng))
        now += session.state.speed
        session.on_frame(now)

    logger.info(
        "Headless %s run: %d ticks, score %d, length %d, %s",
        policy, session.tick_count, session.state.score, session.state.length,
        "game over" if session.state.is_over else "alive",
    )
    session.close()
    return session


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Snake on a wrapping 20x20 grid.")
    p.add_argument("--headless", action="store_true", help="no window; an autopilot plays")
    p.add_argument("--policy", choices=sorted(POLICIES), default="greedy")
    p.add_argument("--ticks", type=int, default=500, help="tick budget for --headless")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cols", type=int, default=20)
    p.add_argument("--rows", type=int, default=20)
    p.add_argument("--show-board", action="store_true", help="print the final board (headless)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.ticks < 0:
        parser.error("--ticks must be >= 0")
    try:
        cfg = Config(
            cols=args.cols,
            rows=args.rows,
            start=(args.cols // 2, args.rows // 2),
            initial_food=((args.cols * 3) // 4, (args.rows * 3) // 4),
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    if args.headless:
        from .render import render_text

        session = run_headless(cfg, args.policy, args.ticks)
        if args.show_board:
            print(render_text(session.state, cfg))
        print(f"Score: {session.state.score}")
        return 0

    score = run_window(cfg)
    print(f"Score: {score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
