from datetime import timedelta


def format_timedelta(td: timedelta) -> str:
    """Render a duration as '1h 2m 3s', dropping leading zero units; '250ms' under a second."""
    if td < timedelta(seconds=1):
        return f"{td // timedelta(milliseconds=1)}ms"

    minutes, seconds = divmod(int(td.total_seconds()), 60)
    hours, minutes = divmod(minutes, 60)
    units = [(hours, "h"), (minutes, "m"), (seconds, "s")]
    while units[0][0] == 0:
        units.pop(0)
    return " ".join(f"{value}{unit}" for value, unit in units)
