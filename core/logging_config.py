import logging
from pathlib import Path

from core.config import settings


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging() -> None:
    """
    Root logger setup for the API process:

    - Drop handlers attached by uvicorn or an earlier call.
    - Log to stdout and to LOG_DIR/portfolio.log.
    - Level comes from LOG_LEVEL (INFO when unknown).
    """
    level_name = settings.LOG_LEVEL or "INFO"
    level = getattr(logging, level_name.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_dir / "portfolio.log", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    root_logger.debug("Logging configured (level=%s)", level_name)
