from __future__ import annotations

import pytest

from src.checkin_streak.checkin_streak.checkin.model import CheckinRecord


def test_new_record_is_empty():
    record = CheckinRecord.create()

    assert record.to_raw() == 0
    assert record.current_streak() == 0
    assert record.max_streak() == 0
    assert not record.is_marked_today()


def test_mark_today_starts_streak():
    record = CheckinRecord.create().mark_today()

    assert record.is_marked_today()
    assert record.current_streak() == 1


@pytest.mark.parametrize("raw", [0, 0b1, 0b1010, -1, 1 << 63, (1 << 64) - 2])
def test_mark_today_always_marks_today(raw):
    assert CheckinRecord.from_raw(raw).mark_today().is_marked_today()


def test_mark_today_is_idempotent():
    once = CheckinRecord.from_raw(0b100).mark_today()
    twice = once.mark_today()

    assert twice.to_raw() == once.to_raw() == 0b101


def test_mutation_does_not_change_input():
    record = CheckinRecord.from_raw(0b10)

    record.mark_today()
    record.advance()
    record.clear()

    assert record.to_raw() == 0b10


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, 0),
        (0b1, 1),
        (0b111, 3),
        (0b1111111, 7),
        (0b1011, 2),
        (0b1001, 1),
        (-1, 64),
    ],
)
def test_current_streak_stops_at_first_gap(raw, expected):
    assert CheckinRecord.from_raw(raw).current_streak() == expected


def test_total_in_window():
    record = CheckinRecord.from_raw(0b1010101)

    assert record.total_in_window(7) == 4
    assert record.total_in_window(3) == 2


@pytest.mark.parametrize("days", [0, -5, 65, 1000])
def test_total_in_window_clamps_to_full_record(days):
    record = CheckinRecord.from_raw((1 << 63) | 0b1)

    assert record.total_in_window(days) == 2
    assert record.total_in_window(days) == record.total_in_window(64)


def test_advance_moves_today_to_yesterday():
    record = CheckinRecord.from_raw(0b1).advance()

    assert record.to_raw() == 0b10
    assert record.is_marked_day(1)
    assert not record.is_marked_today()


def test_advance_drops_oldest_day_without_sign_extension():
    record = CheckinRecord.from_raw((1 << 63) | (1 << 62)).advance()

    assert record.is_marked_day(63)
    assert not record.is_marked_day(62)
    assert record.total_in_window(64) == 1

    assert CheckinRecord.from_raw(1 << 63).advance().to_raw() == 0


def test_advance_result_fits_signed_bigint():
    raw = CheckinRecord.from_raw(1 << 62).advance().to_raw()

    assert raw == -(1 << 63)
    assert -(1 << 63) <= CheckinRecord.from_raw(-1).advance().to_raw() < (1 << 63)


def test_simulated_three_days():
    record = CheckinRecord.create().mark_today()
    assert (str(record), record.to_raw()) == ("✗✗✗✗✗✗✓", 1)

    record = record.advance()
    assert (str(record), record.to_raw()) == ("✗✗✗✗✗✓✗", 2)

    record = record.mark_today()
    assert (str(record), record.to_raw()) == ("✗✗✗✗✗✓✓", 3)

    record = record.advance().mark_today()
    assert (str(record), record.to_raw()) == ("✗✗✗✗✓✓✓", 7)
    assert record.current_streak() == 3


def test_mark_day_sets_given_day():
    record = CheckinRecord.create().mark_day(3).mark_day(63)

    assert record.is_marked_day(3)
    assert record.is_marked_day(63)
    assert record.total_in_window(64) == 2


@pytest.mark.parametrize("day", [-1, 64, 100])
def test_mark_day_out_of_range_is_noop(day):
    record = CheckinRecord.from_raw(0b101)

    assert record.mark_day(day).to_raw() == 0b101


@pytest.mark.parametrize("day", [-1, 64, 100])
def test_is_marked_day_out_of_range_is_false(day):
    assert CheckinRecord.from_raw(-1).is_marked_day(day) is False


def test_day_63_is_read_from_negative_raw_value():
    record = CheckinRecord.from_raw(-(1 << 63))

    assert record.is_marked_day(63)
    assert record.total_in_window(64) == 1


def test_clear_returns_zero():
    assert CheckinRecord.from_raw(-1).clear().to_raw() == 0


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, 0),
        (0b1110011, 3),
        (0b11110110, 4),
        (0b1111101, 5),
        (0b111, 3),
        (-1, 64),
    ],
)
def test_max_streak(raw, expected):
    assert CheckinRecord.from_raw(raw).max_streak() == expected


def test_rate():
    record = CheckinRecord.from_raw(0b1011101)

    assert record.rate(7) == 5 / 7
    assert record.rate(0) == 0.0
    assert record.rate(-3) == 0.0


def test_rate_keeps_requested_divisor_beyond_window():
    record = CheckinRecord.from_raw(-1)

    assert record.rate(64) == 1.0
    assert record.rate(128) == 0.5


def test_render_oldest_to_newest():
    assert CheckinRecord.from_raw(0b111).render(3) == "✓✓✓"
    assert CheckinRecord.from_raw(0b101).render(3) == "✓✗✓"
    assert CheckinRecord.from_raw(0b1010101).render() == "✓✗✓✗✓✗✓"
    assert CheckinRecord.from_raw(0b111).render() == "✗✗✗✗✓✓✓"


def test_render_clamps_days_and_accepts_glyphs():
    record = CheckinRecord.from_raw(0b1)

    assert len(record.render(0)) == 64
    assert len(record.render(99)) == 64
    assert record.render(3, marked="#", unmarked=".") == "..#"


def test_binary_representation():
    assert CheckinRecord.create().binary_representation() == "0b0"
    assert CheckinRecord.from_raw(0b1011).binary_representation() == "0b1011"
    assert CheckinRecord.from_raw(-1).binary_representation() == "0b" + "1" * 64


def test_days_bitmap_starts_with_today():
    record = CheckinRecord.from_raw(0b1011101)

    assert record.days_bitmap(7) == [True, False, True, True, True, False, True]
    assert len(record.days_bitmap(0)) == 64
    assert len(record.days_bitmap(65)) == 64
    assert len(record.days_bitmap(-1)) == 64
    assert record.days_bitmap(-1)[:7] == [True, False, True, True, True, False, True]


@pytest.mark.parametrize("raw", [0, 7, -1, -(1 << 63), (1 << 63) - 1, (1 << 64) - 1])
def test_raw_value_is_kept_verbatim(raw):
    assert CheckinRecord.from_raw(raw).to_raw() == raw


def test_records_compare_by_bit_pattern():
    assert CheckinRecord.from_raw(-1) == CheckinRecord.from_raw((1 << 64) - 1)
    assert hash(CheckinRecord.from_raw(-1)) == hash(CheckinRecord.from_raw((1 << 64) - 1))
    assert CheckinRecord.from_raw(1) != CheckinRecord.from_raw(2)
