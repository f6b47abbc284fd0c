import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(docshot_home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure the ``docshot`` logger with a rotating log file.

    Args:
        docshot_home: Directory holding ``docshot.log``. If None, derived from
            ``DOCSHOT_HOME`` or ``~/.docshot``.
        level: Level for the ``docshot`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if docshot_home is None:
        env_home = os.environ.get("DOCSHOT_HOME")
        docshot_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".docshot"

    docshot_home.mkdir(parents=True, exist_ok=True)
    log_file = docshot_home / "docshot.log"

    root_logger = logging.getLogger("docshot")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers so the next call to configure_logging starts fresh."""
    global _CONFIGURED
    root_logger = logging.getLogger("docshot")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
