from __future__ import annotations

from typing import Optional, Protocol


class CheckinRepository(Protocol):
    """Storage port: one BIGINT ``record`` per subject.

    Implementations must make ``compare_and_swap`` atomic, e.g.
    ``UPDATE user_checkin SET record=%s WHERE user_id=%s AND record=%s``
    (or an INSERT when ``expected`` is None) and report whether a row changed.
    """

    def get_raw(self, subject_id: int) -> Optional[int]:
        raise NotImplementedError

    def compare_and_swap(self, subject_id: int, expected: Optional[int], new: int) -> bool:
        raise NotImplementedError
