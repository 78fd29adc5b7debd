# ppmdecode/raster.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

try:
    from PIL import Image
except ImportError as e:
    raise ImportError("Brak biblioteki Pillow. Zainstaluj: pip install Pillow") from e

from .constants import COLOR_MODEL, OPAQUE

Color = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


@dataclass
class Raster:
    """
    Obraz RGBA w pamięci: width×height, wierszami od góry, x zmienia się najszybciej.
    Bufor `pix` ma długość width * height * 4.
    """

    width: int
    height: int
    pix: Optional[bytearray] = field(default=None, repr=False)

    def __post_init__(self):
        if self.pix is None:
            self.pix = bytearray(self.width * self.height * 4)
        elif len(self.pix) != self.width * self.height * 4:
            raise ValueError("Rozmiar bufora nie pasuje do wymiarów obrazu.")

    @property
    def stride(self) -> int:
        return self.width * 4

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Piksel ({x},{y}) poza obrazem {self.width}×{self.height}")
        return y * self.stride + x * 4

    def set_rgba(self, x: int, y: int, r: int, g: int, b: int, a: int = OPAQUE):
        i = self._offset(x, y)
        self.pix[i : i + 4] = bytes((r, g, b, a))

    def rgba_at(self, x: int, y: int) -> RGBA:
        i = self._offset(x, y)
        r, g, b, a = self.pix[i : i + 4]
        return r, g, b, a

    def rgb_pixels(self) -> List[Color]:
        """Lista (R,G,B) wierszami od góry – bez kanału alfa."""
        p = self.pix
        return [(p[i], p[i + 1], p[i + 2]) for i in range(0, len(p), 4)]

    def tobytes(self) -> bytes:
        return bytes(self.pix)

    def to_image(self):
        """Kopia jako PIL.Image w trybie RGBA."""
        return Image.frombytes(COLOR_MODEL, self.size, self.tobytes())
