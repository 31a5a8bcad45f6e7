from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import (
    BINARY_PREFIX,
    DEFAULT_RENDER_DAYS,
    MARKED_GLYPH,
    SIGN_BIT,
    UNMARKED_GLYPH,
    WINDOW_BITS,
    WINDOW_MASK,
)


def _to_signed(bits: int) -> int:
    """Reinterpret a 64-bit pattern as a signed BIGINT value."""
    bits &= WINDOW_MASK
    return bits - (1 << WINDOW_BITS) if bits & SIGN_BIT else bits


def _clamp_window(days: int) -> int:
    if days <= 0 or days > WINDOW_BITS:
        return WINDOW_BITS
    return days


@dataclass(frozen=True, eq=False)
class CheckinRecord:
    """Check-in history of one subject over the last 64 days.

    Bit 0 is today, bit k is k days ago. ``value`` is kept exactly as it was
    supplied (signed BIGINT or unsigned); every operation works on the masked
    64-bit pattern so the sign never leaks into bit tests. Mutations return a
    new record holding a signed 64-bit value, ready for a BIGINT column.
    """

    value: int = 0

    @classmethod
    def create(cls) -> "CheckinRecord":
        return cls(0)

    @classmethod
    def from_raw(cls, value: int) -> "CheckinRecord":
        return cls(int(value))

    def to_raw(self) -> int:
        return self.value

    @property
    def bits(self) -> int:
        return self.value & WINDOW_MASK

    def _bit(self, day: int) -> bool:
        return (self.bits >> day) & 1 == 1

    # -- mutation -----------------------------------------------------------

    def mark_today(self) -> "CheckinRecord":
        return self.mark_day(0)

    def mark_day(self, day: int) -> "CheckinRecord":
        if day < 0 or day >= WINDOW_BITS:
            return self
        return CheckinRecord(_to_signed(self.bits | (1 << day)))

    def advance(self) -> "CheckinRecord":
        """Move the window forward one day; the oldest day (bit 63) is dropped."""
        return CheckinRecord(_to_signed(self.bits << 1))

    def clear(self) -> "CheckinRecord":
        return CheckinRecord.create()

    # -- queries ------------------------------------------------------------

    def is_marked_today(self) -> bool:
        return self._bit(0)

    def is_marked_day(self, day: int) -> bool:
        if day < 0 or day >= WINDOW_BITS:
            return False
        return self._bit(day)

    def current_streak(self) -> int:
        count = 0
        for day in range(WINDOW_BITS):
            if not self._bit(day):
                break
            count += 1
        return count

    def total_in_window(self, days: int) -> int:
        days = _clamp_window(days)
        return bin(self.bits & ((1 << days) - 1)).count("1")

    def max_streak(self) -> int:
        best = 0
        run = 0
        for day in range(WINDOW_BITS):
            if self._bit(day):
                run += 1
                best = max(best, run)
            else:
                run = 0
        return best

    def rate(self, days: int) -> float:
        # Numerator clamps to the window, denominator stays as supplied.
        if days <= 0:
            return 0.0
        return self.total_in_window(days) / days

    # -- rendering ----------------------------------------------------------

    def render(
        self,
        days: int = DEFAULT_RENDER_DAYS,
        *,
        marked: str = MARKED_GLYPH,
        unmarked: str = UNMARKED_GLYPH,
    ) -> str:
        """Oldest day on the left, today on the right, e.g. ``"✗✓✓"``."""
        days = _clamp_window(days)
        return "".join(marked if self._bit(day) else unmarked for day in range(days - 1, -1, -1))

    def binary_representation(self) -> str:
        return f"{BINARY_PREFIX}{self.bits:b}"

    def days_bitmap(self, days: int) -> List[bool]:
        days = _clamp_window(days)
        return [self._bit(day) for day in range(days)]

    def __str__(self) -> str:
        return self.render()

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckinRecord):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)
