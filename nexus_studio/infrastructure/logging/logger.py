import json
import logging
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger("nexus_studio")
logger.addHandler(logging.NullHandler())

_HANDLER_FLAG = "_nexus_file_handler"


class JsonFormatter(logging.Formatter):
    def __init__(self, redact_content: bool = False):
        super().__init__()
        self.redact_content = redact_content

    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if self.redact_content:
            msg = (msg or "")[:64]
        payload = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "name": record.name,
            "msg": msg,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logger(settings, verbose: bool = False) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    for h in list(logger.handlers):
        if getattr(h, _HANDLER_FLAG, False):
            logger.removeHandler(h)
            h.close()
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(log_dir / "nexus.log", encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(JsonFormatter(settings.log_redact_content))
    setattr(fh, _HANDLER_FLAG, True)
    logger.addHandler(fh)
    return logger
