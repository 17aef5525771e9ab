import os

DEFAULT_DIGITRAFFIC_BASE = "https://rata.digitraffic.fi/api/v1"

PORT = int(os.getenv("PORT", "3000"))
HOST = os.getenv("HOST", "0.0.0.0")

DIGITRAFFIC_BASE_URL = os.getenv("DIGITRAFFIC_BASE_URL", DEFAULT_DIGITRAFFIC_BASE)
DIGITRAFFIC_USER = os.getenv("DIGITRAFFIC_USER", "Sauli-Zjuna-demo")

# Unset means no timeout, same as a bare requests.get()
_timeout = os.getenv("DIGITRAFFIC_TIMEOUT_S")
DIGITRAFFIC_TIMEOUT_S = float(_timeout) if _timeout else None

LINE_ID = os.getenv("LINE_ID", "Z")
DEFAULT_ORIGIN_STATION = os.getenv("DEFAULT_ORIGIN_STATION", "HKI")
SECOND_STATION = os.getenv("SECOND_STATION", "MLÄ")

SCHEDULE_TTL_S = int(os.getenv("SCHEDULE_TTL_S", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
