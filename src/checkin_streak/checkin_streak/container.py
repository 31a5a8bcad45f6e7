from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .checkin.repository import CheckinRepository
from .checkin.service import CheckinService
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings
    checkins_repo: CheckinRepository
    checkin_service: CheckinService


def build_container(*, checkins_repo: CheckinRepository, settings: Settings) -> Container:
    return Container(
        settings=settings,
        checkins_repo=checkins_repo,
        checkin_service=CheckinService(checkins_repo, settings=settings),
    )


def create_container(checkins_repo: CheckinRepository, *, settings_module: Optional[str] = None) -> Container:
    """Load settings, configure logging and wire the service around ``checkins_repo``."""
    settings = load_settings(settings_module)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug(
        "checkin-streak ready (render_days=%d, windows=%s, cas_retries=%d)",
        settings.default_render_days,
        settings.stats_windows,
        settings.cas_retries,
    )
    return build_container(checkins_repo=checkins_repo, settings=settings)
