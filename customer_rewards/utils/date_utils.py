"""Date manipulation utilities"""

from datetime import datetime


def start_of_month(moment: datetime, months_back: int = 0, keep_time: bool = False) -> datetime:
    """
    First day of the month ``months_back`` months before ``moment``.

    The result is at midnight unless ``keep_time`` is set, in which case the
    time of day of ``moment`` is carried over.

    Example:
        2024-03-15 10:30, months_back=3                 -> 2023-12-01 00:00
        2024-03-15 10:30, months_back=3, keep_time=True -> 2023-12-01 10:30
    """
    month_index = moment.year * 12 + (moment.month - 1) - months_back
    year, month = divmod(month_index, 12)
    shifted = moment.replace(year=year, month=month + 1, day=1)
    if keep_time:
        return shifted
    return shifted.replace(hour=0, minute=0, second=0, microsecond=0)
