import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional


LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUPS = 3

# pandas pulls these in for remote/compressed CSV paths
NOISY_LOGGERS: tuple[str, ...] = (
    "fsspec",
    "urllib3",
    "charset_normalizer",
)


class TruncateLongMsgs(logging.Filter):
    """Truncates console lines longer than `max_len`, e.g. echoed oversized date strings."""

    def __init__(self, max_len: int = 300):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except (TypeError, ValueError):
            return True
        if self.max_len and len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


_configured = False


def setup_logging(
    *,
    level: int = logging.INFO,
    console: bool = True,
    console_truncate_len: int = 300,
    log_file: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
    force: bool = False,
) -> None:
    """
    Point the root logger at the converter CLI's console and optional log file.

    Called once from src/main.py; the converter modules only log through
    `logging.getLogger(__name__)` (per-call DEBUG traces of the JDN steps,
    INFO for round-trip checks). Existing root handlers are replaced.
    """
    global _configured
    if _configured and not force:
        return

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        if console_truncate_len and console_truncate_len > 0:
            ch.addFilter(TruncateLongMsgs(console_truncate_len))
        root.addHandler(ch)

    if log_file:
        # Full messages in the file.
        fh = RotatingFileHandler(
            log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("🚀 Converter logging ready (level=%s, file=%s)",
                                      logging.getLevelName(level), log_file)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else __name__)
