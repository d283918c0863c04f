import json
import logging
import sys
from datetime import datetime, timezone


_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_min_level = logging.INFO


def configure_logging(level: str) -> None:
    """Set the minimum level for log_event and the stdlib root logger."""
    global _min_level
    _min_level = _LEVELS.get(level.lower(), logging.INFO)
    logging.basicConfig(level=_min_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def log_event(level: str, event: str, **fields) -> None:
    if _LEVELS.get(level.lower(), logging.INFO) < _min_level:
        return
    payload = {
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "level": level.lower(),
        "event": event,
    }
    payload.update(fields or {})
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
