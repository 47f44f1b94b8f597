# logging_config.py
import logging
import sys

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=logging.INFO, log_file=None):
    """Send the pests log to stdout, and to log_file if one is given."""
    root = logging.getLogger("pests")
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root
