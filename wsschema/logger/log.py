import logging

from wsschema.config import wsschema_config

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

LEVEL_MAP = {
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARNING": WARNING,
    "ERROR": ERROR,
    "CRITICAL": CRITICAL,
}

# ANSI styles for the level column only
_RESET = "\033[0m"
_DIM = "\033[90m"
LEVEL_STYLES = {
    DEBUG: "\033[36m",
    INFO: "\033[32m",
    WARNING: "\033[33m",
    ERROR: "\033[31m",
    CRITICAL: "\033[1;37;41m",
}


class WsCustomFormatter(logging.Formatter):
    """
    One line per record: `time LEVEL logger: message [file:line]`.

    Only the level and the location are styled; pass `use_color=False` for
    plain output (files, CI logs). Tracebacks are appended on following lines.
    """

    def __init__(self, use_color: bool = True) -> None:
        super().__init__(datefmt="%y-%m-%d %H:%M:%S")
        self.use_color = use_color

    def _paint(self, text: str, style: str) -> str:
        return f"{style}{text}{_RESET}" if self.use_color else text

    def format(self, record: logging.LogRecord) -> str:
        level = self._paint(
            f"{record.levelname:<8}", LEVEL_STYLES.get(record.levelno, "")
        )
        location = self._paint(f"[{record.filename}:{record.lineno}]", _DIM)
        line = (
            f"{self.formatTime(record, self.datefmt)} {level} "
            f"{record.name}: {record.getMessage()} {location}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


handler = logging.StreamHandler()
handler.setFormatter(
    WsCustomFormatter(use_color=getattr(handler.stream, "isatty", lambda: False)())
)
handler.setLevel(WARNING)

# Only the package logger is configured; the host application's root logger is left alone.
package_logger = logging.getLogger("wsschema")
package_logger.addHandler(handler)
package_logger.setLevel(WARNING)


def set_level(level: int) -> None:
    handler.setLevel(level)
    package_logger.setLevel(level)


def get_logger(name: str | None = None, level: int | str | None = None) -> logging.Logger:
    """
    Get a logger under the wsschema package logger.

    Level resolution: dev mode forces DEBUG, then an explicit `level`,
    then the configured `log_level`.
    """
    resolved = level if level is not None else wsschema_config.log_level
    if wsschema_config.dev_mode:
        resolved = DEBUG
    if isinstance(resolved, str):
        resolved = LEVEL_MAP[resolved.upper()]

    set_level(resolved)
    return logging.getLogger(name if name else "wsschema")
