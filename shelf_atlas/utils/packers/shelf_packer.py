"""Shelf packing algorithm for allocating texture slots in a fixed canvas.

This module provides a shelf/guillotine style packer. The canvas starts as a
single free region; every allocation picks a free region, carves the
requested block out of its top-left corner and leaves behind at most two
successor regions: one to the right of the block and one underneath it.
A thin strip underneath is dropped when it is not taller than the
admissible waste, so that the store does not fill up with unusable slivers.

Every allocation reserves a one-pixel border on each side of the block, and
the returned rectangle is the block without that border.

Typical usage example:
    packer = Packer(64, 64)
    rect = packer.try_allocate((30, 30))
    results = packer.pack([(14, 14), (14, 30), (30, 30)])
"""

from typing import Iterable, List, Optional, Tuple, Union

from ...globs import BORDER, DEFAULT_ADMISSIBLE_WASTE, PADDING, debug_print
from ..type_hints import Corner, Size


class PackingError(Exception):
    """Indicates an error occurred during the packing process."""

    pass


class NotEnoughSpace(PackingError):
    """No free region is large enough to hold the requested size.

    Attributes:
        size: The requested size, without border padding.
    """

    def __init__(self, size: Size) -> None:
        super().__init__(
            "Not enough space to allocate {}x{}".format(size[0], size[1])
        )
        self.size = size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotEnoughSpace):
            return NotImplemented
        return self.size == other.size

    def __hash__(self) -> int:
        return hash(("NotEnoughSpace", self.size))


class Rect:
    """Axis-aligned rectangle defined by two corners.

    Attributes:
        top_left: Inclusive top-left corner.
        bottom_right: Exclusive bottom-right corner.
    """

    __slots__ = ("top_left", "bottom_right")

    def __init__(self, top_left: Corner, bottom_right: Corner) -> None:
        self.top_left = (int(top_left[0]), int(top_left[1]))
        self.bottom_right = (int(bottom_right[0]), int(bottom_right[1]))

    @classmethod
    def from_tuples(cls, top_left: Corner, bottom_right: Corner) -> "Rect":
        return cls(top_left, bottom_right)

    @property
    def width(self) -> int:
        return self.bottom_right[0] - self.top_left[0]

    @property
    def height(self) -> int:
        return self.bottom_right[1] - self.top_left[1]

    @property
    def size(self) -> Size:
        return self.width, self.height

    @property
    def top_right(self) -> Corner:
        return self.bottom_right[0], self.top_left[1]

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_zero_area(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, other: "Rect") -> bool:
        """Checks if this rectangle completely contains another rectangle.

        Args:
            other: The rectangle to check for containment.

        Returns:
            True if other is contained within this rectangle, False otherwise.
        """
        return (
            other.top_left[0] >= self.top_left[0]
            and other.top_left[1] >= self.top_left[1]
            and other.bottom_right[0] <= self.bottom_right[0]
            and other.bottom_right[1] <= self.bottom_right[1]
        )

    def intersects(self, other: "Rect") -> bool:
        """Checks if the interiors of two rectangles overlap.

        Rectangles that only share an edge do not intersect.
        """
        return (
            self.top_left[0] < other.bottom_right[0]
            and other.top_left[0] < self.bottom_right[0]
            and self.top_left[1] < other.bottom_right[1]
            and other.top_left[1] < self.bottom_right[1]
        )

    def as_box(self) -> Tuple[int, int, int, int]:
        return self.top_left + self.bottom_right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (
            self.top_left == other.top_left
            and self.bottom_right == other.bottom_right
        )

    def __hash__(self) -> int:
        return hash((self.top_left, self.bottom_right))

    def __repr__(self) -> str:
        return "Rect({}, {})".format(self.top_left, self.bottom_right)


AllocationResult = Union[Rect, NotEnoughSpace]


def _validate_size(size: Size) -> Size:
    width, height = size
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    return int(width), int(height)


class Packer:
    """Shelf packer over a fixed-size canvas.

    Attributes:
        width: Width of the canvas.
        height: Height of the canvas.
        areas: Free regions, scanned in order when looking for space. Regions
            are only ever replaced in place or appended, never merged, so
            the list may hold degenerate or redundant entries.
        admissible_waste: Leftover height below a block that is discarded
            instead of being kept as a free region.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width, self.height = _validate_size((width, height))
        self.areas: List[Rect] = []
        self.admissible_waste = DEFAULT_ADMISSIBLE_WASTE
        self.reset()

    @property
    def bounds(self) -> Rect:
        return Rect((0, 0), (self.width, self.height))

    def with_admissible_waste(self, waste: int) -> "Packer":
        """Override the admissible waste threshold.

        Returns:
            Self, for chaining onto the constructor.
        """
        self.admissible_waste = waste
        return self

    def reset(self) -> None:
        """Drop all allocations, leaving one free region over the canvas."""
        self.areas = [self.bounds]

    def pack(self, sizes: Iterable[Size]) -> List[AllocationResult]:
        """Allocate a batch of sizes, tallest first.

        The admissible waste is recomputed from the shortest item so that
        a strip tall enough to hold it is never discarded.

        Args:
            sizes: Requested (width, height) pairs.

        Returns:
            One entry per size, in order of descending height (not input
            order). Each entry is the placement rectangle, or the
            NotEnoughSpace error for a size that did not fit.
        """
        sizes = sorted((_validate_size(size) for size in sizes), key=lambda s: s[1])
        if not sizes:
            return []

        self.admissible_waste = sizes[0][1] - 1 + PADDING
        debug_print(
            "DEBUG: Packing %d sizes with admissible waste %d",
            len(sizes),
            self.admissible_waste,
        )

        results: List[AllocationResult] = []
        for size in reversed(sizes):
            try:
                results.append(self.try_allocate(size))
            except NotEnoughSpace as e:
                results.append(e)
        return results

    def try_allocate(self, size: Size) -> Rect:
        """Allocate a block of the requested size.

        A size with a zero side succeeds immediately with an empty
        rectangle at the origin and reserves nothing.

        Args:
            size: Requested (width, height).

        Returns:
            The placement rectangle, exactly the requested size.

        Raises:
            NotEnoughSpace: No free region can hold the size plus border.
                The free regions are left untouched.
        """
        size = _validate_size(size)
        if size[0] == 0 or size[1] == 0:
            return Rect((0, 0), size)

        width = size[0] + PADDING
        height = size[1] + PADDING

        index = self._find_area(width, height)
        if index is None:
            debug_print("DEBUG: No free region for %dx%d", size[0], size[1])
            raise NotEnoughSpace(size)

        top_left, bottom_right = self.areas[index].top_left, self.areas[index].bottom_right
        split_height = self._split_height(top_left[1] + height, bottom_right[1])

        space_underneath = Rect((top_left[0], split_height), bottom_right)
        space_right = Rect((top_left[0] + width, top_left[1]), space_underneath.top_right)

        if space_right.is_zero_area():
            self.areas[index] = space_underneath
        else:
            self.areas[index] = space_right
            if not space_underneath.is_zero_area():
                self.areas.append(space_underneath)

        return Rect(
            (top_left[0] + BORDER, top_left[1] + BORDER),
            (top_left[0] + width - BORDER, top_left[1] + height - BORDER),
        )

    def _find_area(self, width: int, height: int) -> Optional[int]:
        """Find the index of the free region to carve from.

        The first region that fits is taken; a later fitting region replaces
        it only when it is no larger in both dimensions. This is not a
        minimum-area search and the result depends on region order.
        """
        best = None
        for i, area in enumerate(self.areas):
            area_width, area_height = area.width, area.height
            if width > area_width or height > area_height:
                continue

            if best is None or (
                area_width <= self.areas[best].width
                and area_height <= self.areas[best].height
            ):
                best = i
        return best

    def _split_height(self, block_bottom: int, area_bottom: int) -> int:
        if area_bottom - block_bottom > self.admissible_waste:
            return block_bottom
        return area_bottom
