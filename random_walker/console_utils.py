from colorama import Fore, Style
import logging

logger = logging.getLogger(__name__)

COLOR_MAP = {
    "cyan": Fore.CYAN,
    "yellow": Fore.YELLOW,
    "red": Fore.RED,
    "green": Fore.GREEN,
    "white": Fore.WHITE,
}


def colorize(text, color="white", enabled=True):
    if not enabled:
        return text
    return f"{COLOR_MAP.get(color, Fore.WHITE)}{text}{Style.RESET_ALL}"


def console_print(text, color="white", flush=False, enabled=True):
    print(colorize(text, color, enabled), flush=flush)
    logger.debug(f"Console print: {text}")
