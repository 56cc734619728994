import json
import logging
import sys

from .config import get_settings


def get_logger(name: str = "bigfiles") -> logging.Logger:
    """Logger writing to stderr, so stdout stays reserved for the report."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        settings = get_settings()
        logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))
        handler = logging.StreamHandler(sys.stderr)
        if settings.log_format == "json":
            formatter = JsonLogFormatter()
        else:
            formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "ts": int(record.created * 1000),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)
