from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from config import get_settings_module

from .common.validators import require_glyph, require_positive, require_window, require_windows
from .core.constants import (
    DEFAULT_CAS_RETRIES,
    DEFAULT_RENDER_DAYS,
    DEFAULT_STATS_WINDOWS,
    MARKED_GLYPH,
    UNMARKED_GLYPH,
)
from .core.exceptions import ValidationError


@dataclass(frozen=True)
class Settings:
    marked_glyph: str = MARKED_GLYPH
    unmarked_glyph: str = UNMARKED_GLYPH
    default_render_days: int = DEFAULT_RENDER_DAYS
    stats_windows: Tuple[int, ...] = DEFAULT_STATS_WINDOWS
    cas_retries: int = DEFAULT_CAS_RETRIES
    log_level: str = "INFO"


def _log_level(value: str) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValidationError(f"LOG_LEVEL không hợp lệ: {value!r}")
    return level


def load_settings(settings_module: Optional[str] = None) -> Settings:
    """Load and validate the settings module picked by ``APP_ENV``.

    ``.env`` is read first (without overriding real environment variables), the
    same way the app factory does it.
    """

    load_dotenv(override=False)
    module = importlib.import_module(settings_module or get_settings_module())

    marked = require_glyph(getattr(module, "MARKED_GLYPH", MARKED_GLYPH), "MARKED_GLYPH")
    unmarked = require_glyph(getattr(module, "UNMARKED_GLYPH", UNMARKED_GLYPH), "UNMARKED_GLYPH")
    if marked == unmarked:
        raise ValidationError("MARKED_GLYPH và UNMARKED_GLYPH phải khác nhau")

    return Settings(
        marked_glyph=marked,
        unmarked_glyph=unmarked,
        default_render_days=require_window(
            getattr(module, "DEFAULT_RENDER_DAYS", DEFAULT_RENDER_DAYS), "DEFAULT_RENDER_DAYS"
        ),
        stats_windows=require_windows(getattr(module, "STATS_WINDOWS", DEFAULT_STATS_WINDOWS), "STATS_WINDOWS"),
        cas_retries=require_positive(getattr(module, "CAS_RETRIES", DEFAULT_CAS_RETRIES), "CAS_RETRIES"),
        log_level=_log_level(getattr(module, "LOG_LEVEL", "INFO")),
    )
