"""Structured logging setup."""
import logging, sys, json
from typing import Optional

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED:
                continue
            base[k] = v
        return json.dumps(base, default=str)


def configure_logging(level: str = "INFO", fmt: str = "json", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    ``fmt`` is either ``"json"`` or a ``logging.Formatter`` format string.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(level)
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
