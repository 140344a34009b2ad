import datetime as dt

import pytz


def utc_now():
    """Return the current time as a timezone aware UTC datetime."""
    return dt.datetime.now(tz=pytz.utc)


def round_timedelta(delta: dt.timedelta, resolution: dt.timedelta) -> dt.timedelta:
    """
    Round a timedelta to the nearest multiple of `resolution`.

    Halfway values are rounded away from zero.
    """
    units = delta / resolution
    rounded = int(units + 0.5) if units >= 0 else -int(-units + 0.5)
    return rounded * resolution
