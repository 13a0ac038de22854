"""
Colored console logging shared by the CLI, the scan pipeline and the web UI.
"""

import logging
import sys

from colorama import init, Fore, Style

init(autoreset=True)


class ColoredFormatter(logging.Formatter):

    LEVEL_STYLES = {
        logging.DEBUG: (Fore.WHITE, '[.]'),
        logging.INFO: (Fore.CYAN, '[*]'),
        logging.WARNING: (Fore.YELLOW, '[!]'),
        logging.ERROR: (Fore.RED, '[-]'),
        logging.CRITICAL: (Fore.RED + Style.BRIGHT, '[x]'),
    }

    def format(self, record: logging.LogRecord) -> str:
        color, prefix = self.LEVEL_STYLES.get(record.levelno, (Fore.WHITE, '[?]'))
        message = super().format(record)
        return f"{color}{prefix} {message}{Style.RESET_ALL}"


def get_logger(name: str = "scriptsifter") -> logging.Logger:
    log = logging.getLogger(name)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColoredFormatter('%(message)s'))
        log.addHandler(handler)
        log.setLevel(logging.INFO)

    return log


logger = get_logger()


def set_verbose(enabled: bool = True):
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def set_silent(enabled: bool = True):
    logger.setLevel(logging.ERROR if enabled else logging.INFO)
