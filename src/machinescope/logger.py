import logging

from rich.logging import RichHandler


def setup_logger(
    name: str = "machinescope", level: int = logging.ERROR
) -> logging.Logger:
    """Returns the named logger, attaching a RichHandler on first use."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True, markup=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


logger = setup_logger()
