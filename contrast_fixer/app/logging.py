import json
import logging
from datetime import datetime, timezone
from typing import IO, Optional

class JsonFormatter(logging.Formatter):
    """One JSON object per line; structured context goes in extra={"ctx": {...}}."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        ctx = getattr(record, "ctx", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)

def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """Replace root handlers with a single JSON handler (stderr unless `stream` is given)."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    h = logging.StreamHandler(stream)
    h.setFormatter(JsonFormatter())
    root.addHandler(h)
