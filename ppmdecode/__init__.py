from .errors import PPMError, HeaderError, UnsupportedFormatError, NotEnoughDataError
from .raster import Raster
from .io import Config, decode, decode_config, read_ppm, read_ppm_auto

# rejestruje format "ppm" w Pillow
from . import pillow_plugin

__version__ = "0.1.0"

__all__ = [
    "PPMError",
    "HeaderError",
    "UnsupportedFormatError",
    "NotEnoughDataError",
    "Raster",
    "Config",
    "decode",
    "decode_config",
    "read_ppm",
    "read_ppm_auto",
]
