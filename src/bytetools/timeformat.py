import enum
import time


class TimeFormat(enum.Enum):
    DateTime = 0
    Time = 1
    Date = 2


def local_time_fields(epoch_seconds: int) -> tuple:
    """Break epoch seconds into local (year, month, day, hour, minute, second)."""
    tm = time.localtime(epoch_seconds)
    return tm.tm_year, tm.tm_mon, tm.tm_mday, tm.tm_hour, tm.tm_min, tm.tm_sec


def format_time(epoch_seconds: int, fmt: TimeFormat = TimeFormat.DateTime) -> bytes:
    """Render epoch seconds in local time as YYYY-MM-DD HH:MM:SS, YYYY-MM-DD or HH:MM:SS."""
    year, month, day, hour, minute, second = local_time_fields(epoch_seconds)
    if fmt is TimeFormat.Date:
        text = f"{year:04d}-{month:02d}-{day:02d}"
    elif fmt is TimeFormat.Time:
        text = f"{hour:02d}:{minute:02d}:{second:02d}"
    else:
        text = f"{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"
    return text.encode("ascii")
