import logging
import sys
import traceback

from colorlog import ColoredFormatter

LOGGER_NAME = "cloud_deployer"

DEBUG_MODE = False


def setup_logger(debug_mode=False):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create colored formatter
    formatter = ColoredFormatter(
        "%(log_color)s[%(levelname)s] %(message)s",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "red,bg_white",
        }
    )

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    return logger


def get_debug_mode():
    return DEBUG_MODE


def configure_logger(debug_mode=False):
    """Switch the package logger between INFO and DEBUG."""
    global DEBUG_MODE
    DEBUG_MODE = bool(debug_mode)
    setup_logger(debug_mode=DEBUG_MODE)
    if DEBUG_MODE:
        logger.debug("Debug mode is active.")
    return logger


def print_stack_trace():
    """
    Log the current stack trace if debug mode is enabled.
    """
    if get_debug_mode():
        error_msg = traceback.format_exc()
        logger.error(error_msg)


# Logger defaults to INFO unless reconfigured later.
logger = setup_logger(debug_mode=DEBUG_MODE)
