import logging

from rich.logging import RichHandler

from wordle_scorer import config


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a rich handler to the package logger.

    Calling this more than once replaces the previous handler rather than stacking another.

    Args:
        level (str | int, optional): Logging level. Defaults to config.LOG_LEVEL.

    Returns:
        logging.Logger: The configured "wordle_scorer" logger.
    """
    logger = logging.getLogger("wordle_scorer")
    logger.setLevel(level or config.LOG_LEVEL)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    return logger
