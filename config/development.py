import os

MARKED_GLYPH = os.getenv("MARKED_GLYPH", "✓")
UNMARKED_GLYPH = os.getenv("UNMARKED_GLYPH", "✗")

DEFAULT_RENDER_DAYS = os.getenv("DEFAULT_RENDER_DAYS", "7")
STATS_WINDOWS = os.getenv("STATS_WINDOWS", "7,30")

# Số lần thử lại khi bản ghi bị cập nhật đồng thời
CAS_RETRIES = os.getenv("CAS_RETRIES", "3")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
