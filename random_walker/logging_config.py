# random_walker/logging_config.py
import logging
import os
import tempfile
from logging import StreamHandler, FileHandler
from typing import Tuple

LOG_FILE_NAME = "random_walker.log"


def _ensure_dir(path: str) -> bool:
    """Ensure a directory exists and is writable; return True if ready."""
    try:
        os.makedirs(path, exist_ok=True)
        test_path = os.path.join(path, ".writetest")
        with open(test_path, "w", encoding="utf-8") as f:
            f.write("ok")
        os.remove(test_path)
        return True
    except OSError:
        return False


def _pick_logs_location() -> Tuple[str, str]:
    """
    Pick a logs dir and file path, first writable wins:
      1) <project_root>/logs/
      2) <home>/random_walker_logs/
      3) <temp>/random_walker_logs/
      4) current directory
    Returns: (logs_dir, log_file)
    """
    # project_root: parent of the random_walker/ package
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
    candidates = [
        os.path.join(project_root, "logs"),
        os.path.join(os.path.expanduser("~"), "random_walker_logs"),
        os.path.join(tempfile.gettempdir(), "random_walker_logs"),
    ]

    for logs_dir in candidates:
        if _ensure_dir(logs_dir):
            return logs_dir, os.path.join(logs_dir, LOG_FILE_NAME)

    fallback_dir = os.getcwd()
    return fallback_dir, os.path.join(fallback_dir, LOG_FILE_NAME)


def setup_logging(level: int = logging.INFO, log_to_file: bool = True) -> None:
    """
    Install file + console handlers on the root logger.
    Safe to call multiple times; handlers are only added once.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    if getattr(logger, "_walker_handlers_installed", False):
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    log_file = None
    if log_to_file:
        logs_dir, log_file = _pick_logs_location()
        try:
            file_handler = FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"[Logger] Warning: failed to attach file handler: {e}")
            log_file = None

    console_handler = StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    logger._walker_handlers_installed = True  # type: ignore[attr-defined]

    if log_file:
        logger.debug(f"Log file: {log_file}")
    else:
        logger.debug("File logging disabled (console only).")
