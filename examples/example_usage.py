"""Ví dụ: dùng service layer với một kho lưu trữ trong bộ nhớ.

A real deployment passes a repository backed by a BIGINT column instead.
"""

from typing import Dict, Optional

from src.checkin_streak.checkin_streak.container import create_container


class DictCheckins:
    def __init__(self):
        self._rows: Dict[int, int] = {}

    def get_raw(self, subject_id: int) -> Optional[int]:
        return self._rows.get(subject_id)

    def compare_and_swap(self, subject_id: int, expected: Optional[int], new: int) -> bool:
        if self._rows.get(subject_id) != expected:
            return False
        self._rows[subject_id] = new
        return True


def main():
    container = create_container(DictCheckins())
    service = container.checkin_service

    for _ in range(3):
        service.check_in(subject_id=1)
        service.advance(subject_id=1)
    service.check_in(subject_id=1)

    print(service.get_record(1).binary_representation())
    print(service.get_stats(1).as_dict())


if __name__ == "__main__":
    main()
