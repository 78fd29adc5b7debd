# ppmdecode/pillow_plugin.py
"""
Rejestracja dekodera jako wtyczki Pillow dla plików zaczynających się od P6/P3.

Wtyczka stoi na liście przed wbudowaną wtyczką PPM Pillow. Gdy odrzuci plik
(np. maxval 65535), Image.open próbuje kolejnych wtyczek.
"""
import logging

from PIL import Image, ImageFile

from .constants import MAGIC_ASCII, MAGIC_BINARY
from .errors import PPMError
from .io.ppm import decode as decode_ppm, decode_config

logger = logging.getLogger(__name__)

FORMAT = "PPM"
REGISTRY_ID = "PPMDECODE"
DECODER_NAME = "ppmdecode"

_PREFIXES = (MAGIC_BINARY.encode("ascii"), MAGIC_ASCII.encode("ascii"))


def _accept(prefix: bytes) -> bool:
    return prefix[:2] in _PREFIXES


class PpmImageFile(ImageFile.ImageFile):
    format = FORMAT
    format_description = "Portable pixmap (P3/P6, RGBA)"

    def _open(self):
        try:
            cfg = decode_config(self.fp)
        except PPMError as e:
            # SyntaxError = "nie mój format" dla Image.open
            raise SyntaxError(str(e)) from e
        self._mode = cfg.color_model
        self._size = (cfg.width, cfg.height)
        # offset 0: dekoder czyta plik od początku, razem z nagłówkiem
        self.tile = [(DECODER_NAME, (0, 0) + self.size, 0, None)]


class PpmDecoder(ImageFile.PyDecoder):
    _pulls_fd = True

    def decode(self, buffer):
        # limit rozmiaru sprawdził już Image.open (decompression bomb)
        img = decode_ppm(self.fd, max_pixels=None)
        self.set_as_raw(img.tobytes())
        return -1, 0


def register(first: bool = True):
    """Rejestruje wtyczkę; first=True stawia ją przed wbudowanymi formatami."""
    Image.preinit()
    Image.register_open(REGISTRY_ID, PpmImageFile, _accept)
    Image.register_decoder(DECODER_NAME, PpmDecoder)
    if first:
        Image.ID.remove(REGISTRY_ID)
        Image.ID.insert(0, REGISTRY_ID)
    logger.debug("Zarejestrowano wtyczkę %s (%s)", REGISTRY_ID, FORMAT)


register()
