# Shared type hints

from typing import Tuple

from numpy import ndarray

Size = Tuple[int, int]

Corner = Tuple[int, int]
Box = Tuple[int, int, int, int]

PixelBuffer = ndarray

RGBAColor = Tuple[int, int, int, int]
