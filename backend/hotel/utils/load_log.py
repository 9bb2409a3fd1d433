from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from .correlation import get_correlation_id

LoadAction = Literal[
    "attributes.loaded",
    "attributes.load_failed",
    "rooms.loaded",
    "rooms.record_skipped",
    "rooms.load_failed",
    "room.attribute_added",
    "room.state_changed",
]
LoadLevel = Literal["info", "warning", "error"]

_load_logger = logging.getLogger("hotel.load")
_load_logger.setLevel(logging.INFO)
if not _load_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    _load_logger.addHandler(handler)
_load_logger.propagate = False

_LEVELS: dict[str, int] = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def emit_load_log(
    *,
    action: LoadAction,
    source: Optional[str] = None,
    level: LoadLevel = "info",
    room_id: Optional[int] = None,
    count: Optional[int] = None,
    line: Optional[int] = None,
    message: Optional[str] = None,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    """Emit one structured JSON log line. Raises RuntimeError if logging fails."""
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "action": action,
        "correlation_id": get_correlation_id(),
        "source": source,
        "room_id": room_id,
        "count": count,
        "line": line,
    }
    if message is not None:
        payload["message"] = message
    if extra:
        payload.update(extra)

    compact_payload = {k: v for k, v in payload.items() if v is not None}
    try:
        _load_logger.log(_LEVELS[level], json.dumps(compact_payload, ensure_ascii=True, default=str))
    except Exception as exc:
        raise RuntimeError("failed to emit load log") from exc
