import logging

from .config import settings

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

MODULE_LOG_LEVELS = {
    "villa_web": "INFO",
    "httpx": "WARNING",
    "httpcore": "WARNING",
}


def setup_logging(log_level=None) -> None:
    """Configure console logging for the web frontend process."""
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(level=level, format=DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", force=True)
    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
