import logging
import platform

import numba
import numpy
import pandas

import bezierscore
from bezierscore.reporting import reporting  # noqa: F401 registers Logger.progress
from bezierscore.utils import USE_NUMBA_CACHING

logger = logging.getLogger()


def print_logo() -> None:
    """Print the bezierscore name and version."""
    logger.progress("  _             _            ")
    logger.progress(" | |__  ___ ___(_)___ _ _    ")
    logger.progress(" | '_ \\/ -_)_ /| / -_) '_|   ")
    logger.progress(" |_.__/\\___/__||_\\___|_|score")
    logger.progress("")
    logger.progress(f"version: {bezierscore.__version__}")


def print_environment() -> None:
    """Log the python, numpy, numba and pandas versions."""
    logger.info(
        f"python: {platform.python_version()} ({platform.python_implementation()})"
    )
    logger.info(f"{'numpy':<8} : {numpy.__version__}")
    logger.info(f"{'numba':<8} : {numba.__version__}")
    logger.info(f"{'pandas':<8} : {pandas.__version__}")

    if USE_NUMBA_CACHING:
        logger.info("Numba caching is activated.")
