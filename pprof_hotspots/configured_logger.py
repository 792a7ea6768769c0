import logging
import sys

from typing import Optional

# LogLevel type since logging lib doesn't define its own enum/type for it
LogLevel = int


def new_logger(
    name: str = "pprof_hotspots",
    level: LogLevel = logging.INFO,
    outfile: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger. Library modules only call getLogger, the
    command line entry point is the one place handlers are attached.

    :param name: The logger to configure. Defaults to the package logger.
    :param level: The logging level. Defaults to INFO.
    :param outfile: Optional to set. When set, will log to a file instead of stderr.
    :return: The configured logger.
    """
    log = logging.getLogger(name)
    log.setLevel(level)
    fmt = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s',
                            '%Y-%m-%d %H:%M:%S')

    if outfile is not None:
        handler = logging.FileHandler(outfile)
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(fmt)
    # Replace the handler from any earlier call
    for existing in list(log.handlers):
        log.removeHandler(existing)
    log.addHandler(handler)
    return log
