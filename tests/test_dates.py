from datetime import datetime

from app.utils.dates import end_of_month


def test_end_of_month_is_last_day_at_midnight():
    assert end_of_month("12", "2030") == datetime(2030, 12, 31, 0, 0)


def test_end_of_month_handles_leap_february():
    assert end_of_month("2", "2028") == datetime(2028, 2, 29)
    assert end_of_month("02", "2027") == datetime(2027, 2, 28)


def test_end_of_month_thirty_day_month():
    assert end_of_month("4", "2031").day == 30
