"""Command line entry point: python -m shelf_atlas."""

import argparse
import logging
import sys
from typing import List, Optional

from . import globs
from .demo import DemoSession
from .globs import DEMO_CANVAS_SIZE, DEMO_SCALE
from .utils.previews import save_preview


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Drive the shelf packer with random sizes.")
    parser.add_argument("--size", type=int, nargs=2, default=list(DEMO_CANVAS_SIZE), metavar=("W", "H"))
    parser.add_argument("--steps", type=int, default=0, help="Single random allocations")
    parser.add_argument("--bunch", type=int, default=0, help="Random sizes packed in one batch")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--scale", type=int, default=DEMO_SCALE)
    parser.add_argument("--output", default=None, help="Write a PNG preview here")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    if args.size[0] < 0 or args.size[1] < 0:
        parser.error("--size must not be negative")
    if args.scale < 1:
        parser.error("--scale must be positive")

    if args.debug:
        globs.set_debug(True)
    logging.basicConfig(level=logging.DEBUG if globs.debug else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    session = DemoSession(args.size[0], args.size[1], seed=args.seed)
    for _ in range(args.steps):
        session.apply_step()
    if args.bunch:
        session.apply_bunch(args.bunch)

    print("Placed {} of {} requests, {} free regions".format(len(session.rects), session.step, len(session.packer.areas)))

    if args.output:
        save_preview(args.output, session.packer, session.rects, args.scale)
        print("Preview written to {}".format(args.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
