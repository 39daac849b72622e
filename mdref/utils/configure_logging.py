import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path, level: int = logging.INFO) -> None:
    """Configure mdref logging to a rotating file in the mdref home directory.

    Args:
        home: mdref home directory; created if missing
        level: Level for the ``mdref`` logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "mdref.log"

    root_logger = logging.getLogger("mdref")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
