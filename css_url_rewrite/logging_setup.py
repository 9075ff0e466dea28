"""
Logging configuration for the CSS URL rewriter.

The library only ever logs through :data:`log`; handlers are installed by the
CLI via :func:`setup_logging`.  Records go to stderr so rewritten CSS can be
piped on stdout, and through ``tqdm.write`` when tqdm is installed so they do
not tear the progress bar.
"""

import logging
import sys

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

try:
    from tqdm import tqdm as _tqdm
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False

log = logging.getLogger("css-url-rewrite")

_LOG_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_LOG_DATEFMT = "%H:%M:%S"


class _TqdmStream:
    """File-like shim that prints above any active tqdm bar."""

    def write(self, msg: str) -> None:
        msg = msg.rstrip("\n")
        if msg:
            _tqdm.write(msg, file=sys.stderr)

    def flush(self) -> None:
        sys.stderr.flush()


def _level(debug: bool, quiet: bool) -> int:
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(debug: bool = False, quiet: bool = False) -> None:
    """Install a single stderr handler on :data:`log`; *debug* wins over *quiet*."""
    log.setLevel(_level(debug, quiet))
    log.handlers.clear()
    log.propagate = False

    stream = _TqdmStream() if _TQDM_AVAILABLE else sys.stderr
    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler(stream)
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
            datefmt=_LOG_DATEFMT,
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(_LOG_FMT, datefmt=_LOG_DATEFMT))
    log.addHandler(handler)
