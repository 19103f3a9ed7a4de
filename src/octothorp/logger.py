#!/usr/bin/env python3
import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "octothorp".

    No handlers are attached here; the application embedding the Scanner
    decides where log records go.

    Args:
        name: str. Logger name, typically __name__.

    Returns:
        logger: logging.Logger. Logger named "octothorp.<name>", or name itself
            if it is already within the octothorp namespace.
    """

    if not (name == "octothorp" or name.startswith("octothorp.")):
        name = f"octothorp.{name}"
    return logging.getLogger(name)
