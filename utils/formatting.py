import datetime as dt

DURATION_UNITS = ('week', 'day', 'hour', 'minute', 'second')


def bold(text, marker='**'):
    return f'{marker}{text}{marker}'


def code(text):
    return f'`{text}`'


def format_duration(duration: dt.timedelta) -> str:
    """
    Format a duration as e.g. `1 hour, 2 minutes, 3.5 seconds`.

    Sub-second precision is kept down to milliseconds. Negative durations are
    formatted as zero.
    """
    milliseconds = max(0, round(duration / dt.timedelta(milliseconds=1)))
    seconds, milliseconds = divmod(milliseconds, 1000)

    t = []
    for dm in (60, 60, 24, 7):
        seconds, m = divmod(seconds, dm)
        t.append(m)
    t.append(seconds)

    parts = []
    for num, unit in zip(t[::-1], DURATION_UNITS):
        if unit == 'second' and milliseconds:
            value = f'{num}.{milliseconds:03d}'.rstrip('0')
            parts.append(f'{value} seconds')
        elif num:
            parts.append(f'{num} {unit}' if num == 1 else f'{num} {unit}s')
    return ', '.join(parts) or '0 seconds'
