"""
Logging setup for hull_search.

Modules log through ``logging.getLogger(__name__)``; nothing is configured
on import. Applications (and the CLI) call ``configure_logging``.
"""

import logging

FORMAT = "%(asctime)-15s %(levelname)s %(name)s: %(message)s"


def configure_logging(level="info"):
    """
    Configure the root handler and the ``hull_search`` logger level.

    Parameters
    ----------
    level : str or int
        Level name ("debug", "info", ...) or numeric logging level
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(format=FORMAT)
    logger = logging.getLogger("hull_search")
    logger.setLevel(level)
    return logger
