import json
import logging
import re

from flask import Blueprint, Response, render_template, request

from ztrain import config
from ztrain.departures import get_next_departures
from ztrain.digitraffic import FetchError

logger = logging.getLogger(__name__)

bp = Blueprint("main", __name__)

POLL_INTERVAL_MS = 30000
DASHBOARD_COUNT = 2

NO_DEPARTURES_MESSAGE = "Ei tulevia Z-junia tälle asemalle tänään."
FAILURE_MESSAGE = "Virhe junatiedoissa"

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_count(raw):
    # parseInt(raw, 10); None when there are no leading digits
    match = _LEADING_INT.match(raw or "1")
    if not match:
        return None
    return int(match.group(1))


def _json_response(payload, status=200):
    body = json.dumps(payload, ensure_ascii=False)
    response = Response(body, status=status, content_type="application/json; charset=utf-8")
    response.headers["Cache-Control"] = "no-store"
    return response


@bp.route("/api/next-z-train")
def next_z_train():
    station = request.args.get("station") or config.DEFAULT_ORIGIN_STATION
    target = request.args.get("target") or None
    count = parse_count(request.args.get("count"))

    try:
        departures = get_next_departures(station, target, count)
    except FetchError as exc:
        logger.error("Train data fetch failed (status %s): %s", exc.status_code, exc)
        return _json_response({"error": FAILURE_MESSAGE}, 500)
    except Exception:
        logger.exception("Unexpected error while selecting departures")
        return _json_response({"error": FAILURE_MESSAGE}, 500)

    if not departures:
        return _json_response(
            {"error": NO_DEPARTURES_MESSAGE, "stationShortCode": station}, 404
        )

    if count == 1:
        return _json_response(departures[0].to_dict())
    return _json_response([departure.to_dict() for departure in departures])


@bp.route("/")
def index():
    return render_template(
        "index.html",
        line_id=config.LINE_ID,
        origin_station=config.DEFAULT_ORIGIN_STATION,
        second_station=config.SECOND_STATION,
        count=DASHBOARD_COUNT,
        poll_interval_ms=POLL_INTERVAL_MS,
    )
