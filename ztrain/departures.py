from dataclasses import asdict, dataclass
from typing import Optional

from ztrain.digitraffic import get_line_trains_today
from ztrain.helpers.timestamps import as_utc, parse_timestamp, round_half_up, utc_now

DEPARTURE = "DEPARTURE"


@dataclass(frozen=True)
class Departure:
    stationShortCode: str
    trainNumber: int
    departureDate: str
    scheduledTime: str
    actualTime: Optional[str]
    delayMinutes: int
    cancelled: bool

    def to_dict(self):
        return asdict(self)


def effective_actual_time(row):
    return row.get("actualTime") or row.get("liveEstimateTime") or None


def delay_minutes(row):
    scheduled = parse_timestamp(row.get("scheduledTime"))
    actual = parse_timestamp(effective_actual_time(row))
    if scheduled is None or actual is None:
        return 0
    return round_half_up((actual - scheduled).total_seconds() / 60)


def _first_index(rows, predicate):
    for index, row in enumerate(rows):
        if isinstance(row, dict) and predicate(row):
            return index
    return -1


def select_next_departures(trains, station_code, target_code=None, limit=1, now=None):
    """Return the next departures of ``trains`` from ``station_code``.

    When ``target_code`` is given, only trains that reach the target after
    leaving the station count. A naive ``now`` is taken as UTC.
    ``limit=None`` keeps every match; a zero or negative limit yields an
    empty list.
    """
    now = utc_now() if now is None else as_utc(now)
    candidates = []

    for train in trains:
        rows = train.get("timeTableRows") or []

        depart_index = _first_index(
            rows,
            lambda r: r.get("stationShortCode") == station_code and r.get("type") == DEPARTURE,
        )
        if depart_index == -1:
            continue

        if target_code:
            target_index = _first_index(rows, lambda r: r.get("stationShortCode") == target_code)
            if target_index <= depart_index:
                continue

        row = rows[depart_index]
        scheduled = parse_timestamp(row.get("scheduledTime"))
        if scheduled is None or scheduled <= now:
            continue

        departure = Departure(
            stationShortCode=station_code,
            trainNumber=train.get("trainNumber"),
            departureDate=train.get("departureDate"),
            scheduledTime=row.get("scheduledTime"),
            actualTime=effective_actual_time(row),
            delayMinutes=delay_minutes(row),
            cancelled=bool(train.get("cancelled") or row.get("cancelled")),
        )
        candidates.append((scheduled, departure))

    # list.sort is stable, ties keep train order
    candidates.sort(key=lambda item: item[0])
    departures = [departure for _, departure in candidates]

    if limit is None:
        return departures
    return departures[: max(0, limit)]


def get_next_departures(station_code, target_code=None, limit=1, now=None):
    trains = get_line_trains_today()
    return select_next_departures(trains, station_code, target_code, limit, now=now)
