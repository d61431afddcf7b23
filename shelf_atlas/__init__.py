"""Shelf Atlas.

Allocates rectangular slots for textures and sprites out of a fixed-size
canvas, keeping track of the remaining free space so later requests can
still be satisfied. Every placement keeps a one-pixel border to its
neighbours.

MIT License

Copyright (c) 2026 shelf-atlas contributors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

package_info = {
    "name": "shelf-atlas",
    "description": "Shelf/guillotine rectangle allocator for texture atlases",
    "version": (0, 1, 0),
}

from .utils.packers import fit_images, pack  # noqa: E402
from .utils.packers.shelf_packer import (  # noqa: E402
    NotEnoughSpace,
    Packer,
    PackingError,
    Rect,
)

__version__ = ".".join(str(part) for part in package_info["version"])

__all__ = [
    "NotEnoughSpace",
    "Packer",
    "PackingError",
    "Rect",
    "fit_images",
    "pack",
]
