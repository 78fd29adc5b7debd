# ppmdecode/constants.py

MAGIC_ASCII = "P3"
MAGIC_BINARY = "P6"

# jedyna obsługiwana głębia kanału (1 bajt)
SUPPORTED_MAXVAL = 255
HEADER_FIELDS = 4

WHITESPACE = b" \t\n"
COMMENT = 0x23  # '#'
NEWLINE = 0x0A

BUFFER_SIZE = 1 << 16

# Limit pikseli jak Image.MAX_IMAGE_PIXELS w Pillow; None = bez limitu
MAX_PIXELS = 1 << 28

COLOR_MODEL = "RGBA"
OPAQUE = 0xFF
