from .cursor import ByteCursor
from .scanner import TokenScanner
from .ppm import (
    Config,
    Header,
    PixelFormat,
    decode,
    decode_config,
    read_header,
    read_ppm,
    read_ppm_auto,
)

__all__ = [
    "ByteCursor",
    "TokenScanner",
    "Config",
    "Header",
    "PixelFormat",
    "decode",
    "decode_config",
    "read_header",
    "read_ppm",
    "read_ppm_auto",
]
