import logging
from logging.handlers import RotatingFileHandler

from assetverse.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging() -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    root_logger.setLevel(settings.log_level)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(settings.data_dir / "app.log", maxBytes=1_000_000, backupCount=3)
    file_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # passlib warns on every start about the bcrypt backend version
    logging.getLogger("passlib").setLevel(logging.ERROR)
