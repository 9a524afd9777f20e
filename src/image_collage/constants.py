"""
Constants used internally by the image collage library.

These are implementation-level values that should not be overridden
via config files or option records.
"""

# Internal color constants
COLOR_MODE_RGBA = "RGBA"
COLOR_BLACK = (0, 0, 0)
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Surface encoding
ENCODE_FORMAT = "PNG"

# Source classification. Matched against the start of the string only,
# so "httpbin.png" is still treated as a URL.
URL_PREFIXES = ("http", "ftp")
FTP_PREFIX = "ftp"
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# Text rendering
TEXT_FONT_PX = 40
TEXT_FONT_FILES = ("arial.ttf", "Arial.ttf", "DejaVuSerif.ttf")
TEXT_FILL = COLOR_BLACK
TEXT_ORIGIN_X = 150
TEXT_ORIGIN_Y = 150
TEXT_LINE_HEIGHT = 75
