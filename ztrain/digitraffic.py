import logging
from datetime import datetime, timedelta

import requests

from ztrain import config
from ztrain.helpers.timestamps import today_date_string

logger = logging.getLogger(__name__)

LAST_SCHEDULE_REFRESH = datetime.min
CACHED_SCHEDULE = None
CACHED_SCHEDULE_DATE = None


class FetchError(RuntimeError):
    """Raised when the Digitraffic timetable API cannot be read."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def trains_url(day):
    return f"{config.DIGITRAFFIC_BASE_URL}/trains/{day}"


def fetch_trains(day, session=None):
    url = trains_url(day)
    logger.info("Fetching trains from %s", url)

    http = session or requests
    try:
        response = http.get(
            url,
            headers={"Digitraffic-User": config.DIGITRAFFIC_USER},
            timeout=config.DIGITRAFFIC_TIMEOUT_S,
        )
    except requests.RequestException as exc:
        raise FetchError(f"Digitraffic request failed: {exc}") from exc

    if not response.ok:
        try:
            body = response.text
        except (requests.RequestException, UnicodeDecodeError):
            body = "<unreadable body>"
        logger.error("Digitraffic error %s: %s", response.status_code, body)
        raise FetchError(
            f"Digitraffic API returned status {response.status_code}",
            status_code=response.status_code,
        )

    try:
        trains = response.json()
    except ValueError as exc:
        raise FetchError("Digitraffic returned a non-JSON response") from exc

    if not isinstance(trains, list):
        raise FetchError("Digitraffic response is not a list of trains")
    return trains


def filter_line(trains, line_id):
    return [
        train
        for train in trains
        if isinstance(train, dict) and train.get("commuterLineID") == line_id
    ]


def fetch_line_trains_today(today=None, session=None):
    day = today_date_string(today)
    line_trains = filter_line(fetch_trains(day, session=session), config.LINE_ID)
    logger.info("%s trains today: %d", config.LINE_ID, len(line_trains))
    return line_trains


def get_line_trains_today(now=None, today=None, session=None):
    global LAST_SCHEDULE_REFRESH, CACHED_SCHEDULE, CACHED_SCHEDULE_DATE

    if config.SCHEDULE_TTL_S <= 0:
        return fetch_line_trains_today(today=today, session=session)

    if now is None:
        now = datetime.now()
    day = today_date_string(today)

    fresh = now - LAST_SCHEDULE_REFRESH < timedelta(seconds=config.SCHEDULE_TTL_S)
    if fresh and CACHED_SCHEDULE is not None and CACHED_SCHEDULE_DATE == day:
        return CACHED_SCHEDULE

    trains = fetch_line_trains_today(today=today, session=session)
    CACHED_SCHEDULE = trains
    CACHED_SCHEDULE_DATE = day
    LAST_SCHEDULE_REFRESH = now
    return trains
