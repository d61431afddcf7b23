from typing import Dict, Iterable, List, Optional

from ...globs import debug_print
from ..type_hints import Size
from .shelf_packer import AllocationResult, NotEnoughSpace, Packer, Rect


def _new_packer(atlas_size: Size, admissible_waste: Optional[int]) -> Packer:
    packer = Packer(*atlas_size)
    if admissible_waste is not None:
        packer.with_admissible_waste(admissible_waste)
    return packer


def pack(
    sizes: Iterable[Size], atlas_size: Size, admissible_waste: Optional[int] = None
) -> List[AllocationResult]:
    """Pack a batch of sizes into a fresh canvas of the given size.

    Results come back in order of descending height, see Packer.pack.
    """
    return _new_packer(atlas_size, admissible_waste).pack(sizes)


def fit_images(
    images: Dict, atlas_size: Size, admissible_waste: Optional[int] = None
) -> Dict:
    """Place all textures of an atlas structure in one batch.

    Args:
        images: Dictionary of materials and their size data, in the format
            {material_id: {'gfx': {'size': (width, height)}}}
        atlas_size: Width and height of the atlas canvas.
        admissible_waste: Initial waste threshold. A non-empty batch
            recomputes it from its shortest texture.

    Returns:
        The same dictionary, with each item's 'gfx.fit' set to the x, y
        coordinates, width and height of its slot, or None if it did not fit.
    """
    if not images:
        return images

    # Same stable ascending sort as Packer.pack, walked tallest first
    items = sorted(images.values(), key=lambda img: img["gfx"]["size"][1])
    items.reverse()

    packer = _new_packer(atlas_size, admissible_waste)
    results = packer.pack([img["gfx"]["size"] for img in images.values()])

    missing = 0
    for img, result in zip(items, results):
        if isinstance(result, NotEnoughSpace):
            img["gfx"]["fit"] = None
            missing += 1
            continue
        img["gfx"]["fit"] = _to_fit(result)

    if missing:
        debug_print("DEBUG: %d of %d textures did not fit", missing, len(items))
    return images


def _to_fit(rect: Rect) -> Dict[str, int]:
    x, y = rect.top_left
    return {"x": x, "y": y, "w": rect.width, "h": rect.height}
