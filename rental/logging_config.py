"""Logging configuration for the fleet tools."""

import logging


def configure_logging(verbose: bool = False) -> bool:
    """
    Log to the console; DEBUG when verbose, otherwise WARNING.

    Returns False, changing nothing, when the root logger already has
    handlers installed by an embedding application.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return False

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return True
