from wsschema.logger.log import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    WsCustomFormatter,
    get_logger,
    handler,
    package_logger,
    set_level,
)

__all__ = (
    "get_logger",
    "package_logger",
    "handler",
    "set_level",
    "WsCustomFormatter",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)
