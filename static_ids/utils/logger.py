# static_ids/utils/logger.py

import logging


def get_logger(name: str) -> logging.Logger:
    """ Returns a named logger. Handlers are configured by the entry point, never here. """
    return logging.getLogger(name)
