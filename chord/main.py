import argparse
import logging

import pygame

from .chain import PROFILES, Chain
from .constants import FPS, HEIGHT, PROFILE, SEGMENTS, STIFFNESS, WIDTH
from .logging_config import setup_logging
from .screen import Screen

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Vibrating chord simulation')
    parser.add_argument('--segments', '-n', type=int, default=SEGMENTS,
                        help=f'Number of segments between the anchors (default: {SEGMENTS})')
    parser.add_argument('--stiffness', '-k', type=float, default=STIFFNESS,
                        help=f'Spring stiffness coefficient (default: {STIFFNESS})')
    parser.add_argument('--profile', '-p', choices=sorted(PROFILES), default=PROFILE,
                        help=f'Initial shape of the chord (default: {PROFILE})')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    args = parser.parse_args(argv)
    # before the chain is built so its construction is logged
    setup_logging(getattr(logging, args.log_level))
    try:
        args.chain = Chain.from_profile(args.segments, args.stiffness, args.profile)
    except ValueError as e:
        parser.error(str(e))
    return args


def run(chain, screen):
    clock = pygame.time.Clock()
    frames = 0
    screen.draw(chain)
    while True:
        chain.tick()
        screen.draw(chain)
        screen.tick()
        frames += 1
        if screen.should_end:
            break
        clock.tick(FPS)
    return frames


def main(argv=None):
    args = parse_args(argv)
    logger.info("Starting %r (profile=%s)", args.chain, args.profile)

    screen = Screen(WIDTH, HEIGHT)
    try:
        frames = run(args.chain, screen)
    finally:
        screen.close()
    logger.info("Stopped after %d frames", frames)


if __name__ == "__main__":
    main()
