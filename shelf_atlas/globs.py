"""Global constants and configuration for Shelf Atlas.

This module holds the defaults shared by the packer, the preview renderer
and the demo driver, together with the debug switch used for diagnostic
output.
"""

import logging
import os

logger = logging.getLogger("shelf_atlas")

debug = os.environ.get("SHELF_ATLAS_DEBUG", "").lower() in ("1", "true", "yes", "on")

# Leftover height at or below this value is dropped instead of kept free
DEFAULT_ADMISSIBLE_WASTE = 8

# Gap kept on every side of a placement
BORDER = 1
PADDING = BORDER * 2

DEMO_CANVAS_SIZE = (128, 128)
DEMO_SCALE = 5
DEMO_BUNCH_STEPS = 50
# Half-open range of random side lengths used by the demo
DEMO_SIDE_RANGE = (2, 25)


def set_debug(enabled: bool) -> None:
    """Toggle diagnostic output at runtime."""
    global debug
    debug = enabled


def debug_print(message: str, *args: object) -> None:
    if debug:
        logger.debug(message, *args)
