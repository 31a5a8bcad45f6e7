from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..core.constants import DEFAULT_RENDER_DAYS, DEFAULT_STATS_WINDOWS, MARKED_GLYPH, UNMARKED_GLYPH
from .model import CheckinRecord


@dataclass(frozen=True)
class CheckinStats:
    """Read-model phục vụ hiển thị thống kê điểm danh của một đối tượng."""

    current_streak: int
    max_streak: int
    totals: Dict[int, int]
    rate_days: int
    rate: float
    render_days: int
    recent: str
    bitmap: List[bool]
    binary: str

    def meets_streak(self, threshold: int) -> bool:
        return self.current_streak >= threshold

    def as_dict(self) -> dict:
        payload: dict = {
            "continuous_days": self.current_streak,
            "max_continuous": self.max_streak,
        }
        for days, total in self.totals.items():
            payload[f"total_{days}days"] = total
        payload[f"rate_{self.rate_days}days"] = self.rate
        payload[f"recent_{self.render_days}days"] = self.recent
        payload[f"bitmap_{self.render_days}days"] = list(self.bitmap)
        payload["binary"] = self.binary
        return payload


def summarize(
    record: CheckinRecord,
    *,
    windows: Sequence[int] = DEFAULT_STATS_WINDOWS,
    render_days: int = DEFAULT_RENDER_DAYS,
    marked: str = MARKED_GLYPH,
    unmarked: str = UNMARKED_GLYPH,
) -> CheckinStats:
    """Compute every statistic from one record; the rate uses the first window."""
    windows = tuple(windows) or (render_days,)
    return CheckinStats(
        current_streak=record.current_streak(),
        max_streak=record.max_streak(),
        totals={days: record.total_in_window(days) for days in windows},
        rate_days=windows[0],
        rate=record.rate(windows[0]),
        render_days=render_days,
        recent=record.render(render_days, marked=marked, unmarked=unmarked),
        bitmap=record.days_bitmap(render_days),
        binary=record.binary_representation(),
    )
