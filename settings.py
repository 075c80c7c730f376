"""Process-wide settings."""

import logging
import sys


# Native unsigned integer width; ids never encode anything wider.
word_bits = 64

log_level = "INFO"


def setup_logging(stream=sys.stderr):
    """Configure the logging module"""
    log = logging.getLogger()
    log.setLevel(getattr(logging, log_level))
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(
            "%(asctime)s %(process)d %(levelname)s %(message)s"))
    log.addHandler(handler)
    return handler
