import logging
from logging import Handler

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | str = logging.WARNING, use_rich: bool = False) -> None:
    """
    Configure root logging for command line use.
    """
    if use_rich:
        handlers: list[Handler] = [
            RichHandler(show_time=True, show_level=True, show_path=False)
        ]
        fmt = "%(message)s"
    else:
        handlers = [logging.StreamHandler()]
        fmt = LOG_FORMAT
    logging.basicConfig(level=level, format=fmt, handlers=handlers, force=True)


def apply_logger_setting(name: str, level: int | str = logging.WARNING) -> None:
    """
    Apply the ``logger`` configuration value to the ``hiera`` logger.

    ``console`` writes to stderr, ``noop`` silences the library entirely.
    Unknown names fall back to ``console``.
    """
    lib_logger = logging.getLogger("hiera")
    for handler in list(lib_logger.handlers):
        lib_logger.removeHandler(handler)

    if name == "noop":
        lib_logger.addHandler(logging.NullHandler())
        lib_logger.propagate = False
        return

    if name != "console":
        logging.getLogger(__name__).warning(
            "Unknown logger %r, falling back to console", name
        )
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    lib_logger.addHandler(handler)
    lib_logger.setLevel(level)
    lib_logger.propagate = False
