# ppmdecode/io/ppm.py
import io
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from .. import constants
from ..constants import COLOR_MODEL, HEADER_FIELDS, OPAQUE, SUPPORTED_MAXVAL
from ..errors import HeaderError, NotEnoughDataError, UnsupportedFormatError
from ..raster import Color, Raster
from .cursor import ByteCursor
from .scanner import TokenScanner

logger = logging.getLogger(__name__)

# liczba dziesiętna: opcjonalny znak + same cyfry ASCII
_INT_RE = re.compile(rb"[+-]?[0-9]+")


def _parse_int(tok: bytes) -> Optional[int]:
    if not _INT_RE.fullmatch(tok):
        return None
    return int(tok)


class PixelFormat(Enum):
    ASCII = constants.MAGIC_ASCII
    BINARY = constants.MAGIC_BINARY

    @classmethod
    def from_magic(cls, magic: bytes) -> "PixelFormat":
        for fmt in cls:
            if fmt.value.encode("ascii") == magic:
                return fmt
        raise HeaderError(f"ppm: nieznany magic {magic!r} (oczekiwano P3/P6)")


@dataclass(frozen=True)
class Header:
    magic: PixelFormat
    width: int
    height: int
    maxval: int


class Config(NamedTuple):
    color_model: str
    width: int
    height: int


def _as_stream(src):
    if isinstance(src, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(src))
    return src


# ---------- nagłówek ----------


def read_header(cursor: ByteCursor) -> Header:
    """
    Czyta 4 pola nagłówka (magic, szerokość, wysokość, maxval).
    Po powrocie kursor stoi na pierwszym bajcie danych obrazu.
    """
    fields = TokenScanner(cursor).tokens(HEADER_FIELDS)
    if len(fields) < HEADER_FIELDS:
        logger.debug("Nagłówek urwany po %d polach", len(fields))
        raise HeaderError("ppm: niepełny nagłówek")

    magic = PixelFormat.from_magic(fields[0])

    width = _parse_int(fields[1])
    height = _parse_int(fields[2])
    if width is None or height is None:
        raise HeaderError("ppm: wymiary nie są liczbami całkowitymi")
    if width <= 0 or height <= 0:
        raise HeaderError(f"ppm: nieprawidłowe wymiary {width}×{height}")

    maxval = _parse_int(fields[3])
    if maxval is None:
        raise HeaderError("ppm: maxval nie jest liczbą całkowitą")
    if maxval != SUPPORTED_MAXVAL:
        raise UnsupportedFormatError(
            f"ppm: nieobsługiwany format (maxval {maxval} != {SUPPORTED_MAXVAL})"
        )

    header = Header(magic, width, height, maxval)
    logger.debug("Nagłówek PPM: %s", header)
    return header


# ---------- odczyt pikseli ----------


class BinaryPixelReader:
    """P6: każdy piksel to 3 surowe bajty, bez komentarzy i białych znaków."""

    def __init__(self, cursor: ByteCursor):
        self.cursor = cursor

    def read_pixel(self) -> Color:
        data = self.cursor.read_exact(3)
        if len(data) < 3:
            raise NotEnoughDataError()
        return data[0], data[1], data[2]


class AsciiPixelReader:
    """P3: składowe jako liczby dziesiętne 0..255 oddzielone białymi znakami."""

    def __init__(self, cursor: ByteCursor):
        self.scanner = TokenScanner(cursor)

    def read_subpixel(self) -> int:
        tok = self.scanner.next_token()
        if tok is None:
            raise NotEnoughDataError()
        val = _parse_int(tok)
        if val is None or not 0 <= val <= 255:
            raise NotEnoughDataError(f"ppm: nieprawidłowa składowa {tok!r}")
        return val

    def read_pixel(self) -> Color:
        return self.read_subpixel(), self.read_subpixel(), self.read_subpixel()


_READERS = {
    PixelFormat.ASCII: AsciiPixelReader,
    PixelFormat.BINARY: BinaryPixelReader,
}


def assemble(header: Header, cursor: ByteCursor) -> Raster:
    """Wypełnia raster piksel po pikselu: wiersze od góry, w wierszu od lewej."""
    reader = _READERS[header.magic](cursor)
    img = Raster(header.width, header.height)
    for y in range(header.height):
        for x in range(header.width):
            r, g, b = reader.read_pixel()
            img.set_rgba(x, y, r, g, b, OPAQUE)
    return img


# ---------- API ----------

_DEFAULT_LIMIT = object()


def decode(src, max_pixels=_DEFAULT_LIMIT) -> Raster:
    """
    Dekoduje cały obraz PPM (P3/P6) ze strumienia binarnego lub bajtów.
    Domyślny limit pikseli to constants.MAX_PIXELS; max_pixels=None wyłącza limit.
    """
    cursor = ByteCursor(_as_stream(src))
    header = read_header(cursor)

    limit = constants.MAX_PIXELS if max_pixels is _DEFAULT_LIMIT else max_pixels
    npix = header.width * header.height
    if limit is not None and npix > limit:
        raise UnsupportedFormatError(
            f"ppm: obraz za duży ({npix} > {limit} pikseli)"
        )

    try:
        img = assemble(header, cursor)
    except NotEnoughDataError:
        logger.debug(
            "Dane obrazu %s urwane po %d bajtach", header.magic.value, cursor.consumed
        )
        raise
    logger.debug("Zdekodowano %s %d×%d", header.magic.value, img.width, img.height)
    return img


def decode_config(src) -> Config:
    """Tylko nagłówek: model koloru i wymiary, bez czytania pikseli."""
    header = read_header(ByteCursor(_as_stream(src)))
    return Config(COLOR_MODEL, header.width, header.height)


# ---------- pliki ----------


def read_ppm(path: str, max_pixels=_DEFAULT_LIMIT) -> Raster:
    with open(path, "rb") as f:
        return decode(f, max_pixels=max_pixels)


def read_ppm_auto(path: str) -> Tuple[int, int, List[Color], str]:
    """Zwraca (w, h, piksele RGB, "P3"/"P6")."""
    with open(path, "rb") as f:
        magic = f.read(2)
        f.seek(0)
        img = decode(f)
    return img.width, img.height, img.rgb_pixels(), magic.decode("ascii")
