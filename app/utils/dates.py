import calendar
from datetime import datetime


def end_of_month(month: str, year: str) -> datetime:
    """Local midnight on the last calendar day of ``month``/``year``.

    Both values are the raw form strings; callers validate them first.
    """
    month_number = int(month)
    year_number = int(year)
    last_day = calendar.monthrange(year_number, month_number)[1]
    return datetime(year_number, month_number, last_day)
