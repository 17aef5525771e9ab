# Helper utilities for the ISO-8601 timestamps used in Digitraffic timetable rows.
import math
from datetime import date, datetime, timezone


def today_date_string(today=None):
    if today is None:
        today = date.today()
    return today.strftime("%Y-%m-%d")


def parse_timestamp(value):
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    return as_utc(parsed)


def as_utc(moment):
    # naive datetimes are taken to be UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def round_half_up(value):
    # 7.5 -> 8, -2.5 -> -2
    return int(math.floor(value + 0.5))


def utc_now():
    return datetime.now(timezone.utc)
