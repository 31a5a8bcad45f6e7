MARKED_GLYPH = "✓"
UNMARKED_GLYPH = "✗"

DEFAULT_RENDER_DAYS = 7
STATS_WINDOWS = (7, 30)

CAS_RETRIES = 3

LOG_LEVEL = "WARNING"
TESTING = True
