"""Headless driver for exploring the packer with random requests.

Each step requests one random size; a bunch requests many sizes at once
through the batch path. Successful placements are kept so they can be drawn
with utils.previews.
"""

import random
from typing import List, Optional

from .globs import DEMO_BUNCH_STEPS, DEMO_CANVAS_SIZE, DEMO_SIDE_RANGE, debug_print
from .utils.packers.shelf_packer import NotEnoughSpace, Packer, Rect
from .utils.type_hints import Size


class DemoSession:
    """State of one demo run.

    Attributes:
        width: Canvas width.
        height: Canvas height.
        packer: The packer being driven.
        rects: Placements made so far.
        step: Number of sizes requested so far, successful or not.
    """

    def __init__(
        self,
        width: int = DEMO_CANVAS_SIZE[0],
        height: int = DEMO_CANVAS_SIZE[1],
        seed: Optional[int] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.random = random.Random(seed)
        self.packer = Packer(width, height)
        self.rects: List[Rect] = []
        self.step = 0

    def random_size(self) -> Size:
        low, high = DEMO_SIDE_RANGE
        return self.random.randrange(low, high), self.random.randrange(low, high)

    def reset(self) -> None:
        self.packer = Packer(self.width, self.height)
        self.rects.clear()

    def apply_step(self) -> Optional[Rect]:
        """Request one random size. Returns the placement, or None if it did not fit."""
        size = self.random_size()
        self.step += 1
        try:
            rect = self.packer.try_allocate(size)
        except NotEnoughSpace:
            debug_print("DEBUG: Step %d: %dx%d did not fit", self.step, size[0], size[1])
            return None
        self.rects.append(rect)
        return rect

    def apply_bunch(self, steps: int = DEMO_BUNCH_STEPS) -> int:
        """Request a batch of random sizes. Returns how many were placed."""
        sizes = [self.random_size() for _ in range(steps)]
        placed = [r for r in self.packer.pack(sizes) if isinstance(r, Rect)]
        self.rects.extend(placed)
        self.step += steps
        return len(placed)
