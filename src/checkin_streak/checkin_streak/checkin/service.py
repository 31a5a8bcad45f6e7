from __future__ import annotations

import logging
from typing import Callable, Optional

from ..core.exceptions import ConcurrentUpdateError, ValidationError
from ..settings import Settings
from .model import CheckinRecord
from .repository import CheckinRepository
from .stats import CheckinStats, summarize

logger = logging.getLogger(__name__)


class CheckinService:
    def __init__(self, checkins: CheckinRepository, *, settings: Settings | None = None):
        self._checkins = checkins
        self._settings = settings or Settings()

    def get_record(self, subject_id: int) -> CheckinRecord:
        raw = self._checkins.get_raw(subject_id)
        if raw is None:
            return CheckinRecord.create()
        return CheckinRecord.from_raw(raw)

    def is_checked_in_today(self, subject_id: int) -> bool:
        return self.get_record(subject_id).is_marked_today()

    def check_in(self, subject_id: int) -> CheckinRecord:
        def mark(record: CheckinRecord) -> CheckinRecord:
            if record.is_marked_today():
                raise ValidationError("Hôm nay bạn đã điểm danh rồi")
            return record.mark_today()

        record = self._update(subject_id, mark, create_missing=True)
        logger.info("subject %s checked in, streak=%d", subject_id, record.current_streak())
        return record

    def advance(self, subject_id: int) -> CheckinRecord:
        """Roll one subject's window into the next day (called once per day boundary)."""
        return self._update(subject_id, CheckinRecord.advance, create_missing=False)

    def get_stats(self, subject_id: int) -> CheckinStats:
        s = self._settings
        return summarize(
            self.get_record(subject_id),
            windows=s.stats_windows,
            render_days=s.default_render_days,
            marked=s.marked_glyph,
            unmarked=s.unmarked_glyph,
        )

    def _update(
        self,
        subject_id: int,
        change: Callable[[CheckinRecord], CheckinRecord],
        *,
        create_missing: bool,
    ) -> CheckinRecord:
        for attempt in range(1, self._settings.cas_retries + 1):
            raw: Optional[int] = self._checkins.get_raw(subject_id)
            if raw is None and not create_missing:
                logger.debug("subject %s has no stored record, nothing to update", subject_id)
                return CheckinRecord.create()

            current = CheckinRecord.create() if raw is None else CheckinRecord.from_raw(raw)
            updated = change(current)
            if self._checkins.compare_and_swap(subject_id, raw, updated.to_raw()):
                return updated

            logger.warning(
                "record of subject %s changed concurrently (attempt %d/%d)",
                subject_id,
                attempt,
                self._settings.cas_retries,
            )

        raise ConcurrentUpdateError(
            f"Không thể cập nhật bản ghi của {subject_id} sau {self._settings.cas_retries} lần thử"
        )
