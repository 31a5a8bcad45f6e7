"""Bit layout of the 64-day check-in window and the display/stats defaults."""

WINDOW_BITS = 64
WINDOW_MASK = (1 << WINDOW_BITS) - 1
SIGN_BIT = 1 << (WINDOW_BITS - 1)

DEFAULT_RENDER_DAYS = 7
DEFAULT_STATS_WINDOWS = (7, 30)
DEFAULT_CAS_RETRIES = 3

MARKED_GLYPH = "✓"
UNMARKED_GLYPH = "✗"
BINARY_PREFIX = "0b"
