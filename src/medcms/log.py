import copy
import logging.config

from .consts import LOG_FILE_DEFAULT
from .utils import canonicalify, ensure_path

LOGGING_CONFIG = {
    "version": 1,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": logging.INFO,
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": logging.DEBUG,
            "formatter": "default",
            "filename": LOG_FILE_DEFAULT,
            "maxBytes": 5 * 1024 * 1024,  # 5MB
            "backupCount": 10,
        },
    },
    "loggers": {
        "medcms": {
            "handlers": ["console", "file"],
            "level": logging.DEBUG,
            "propagate": False,
        }
    },
}


def build_config(logfile=None, debug=False) -> dict:
    """Return a copy of ``LOGGING_CONFIG`` for ``logfile``.

    The console stays on stderr so command output on stdout (layouts,
    validated JSON) is never interleaved with log lines.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    handlers = config["handlers"]

    path = canonicalify(logfile or handlers["file"]["filename"])
    handlers["file"]["filename"] = str(path)
    if debug:
        handlers["console"]["level"] = logging.DEBUG
    return config


def setup(logfile=None, debug=False):
    config = build_config(logfile, debug)
    ensure_path(canonicalify(config["handlers"]["file"]["filename"]).parent)
    logging.config.dictConfig(config)
