"""
nearclient_core.logger
----------------------
One JSON object per log line, UTC timestamps.

NEARCLIENT_LOG_LEVEL sets the default level and NEARCLIENT_LOG_FILE adds a
file handler. Both are read when a logger is first configured.
"""

import logging, json, sys, time, os


class JsonFormatter(logging.Formatter):
    converter = time.gmtime

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%SZ")

    def format(self, record):
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _level_from_env(default=logging.INFO):
    name = os.getenv("NEARCLIENT_LOG_LEVEL")
    level = logging.getLevelName(name.upper()) if name else default
    return level if isinstance(level, int) else default


def get_logger(name="nearclient", level=None, to_file=None):
    """Return a configured logger; repeat calls keep the existing level unless ``level`` is given."""
    logger = logging.getLogger(name)
    if logger.handlers:
        if level is not None:
            logger.setLevel(level)
        return logger

    logger.setLevel(level if level is not None else _level_from_env())
    formatter = JsonFormatter()
    handlers = [logging.StreamHandler(sys.stdout)]

    to_file = to_file or os.getenv("NEARCLIENT_LOG_FILE")
    if to_file:
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(to_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
