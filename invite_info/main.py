import asyncio
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn

from .api import create_app
from .config import Settings, settings, validate_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILE_NAME = "invite_info.log"

# Per-request lines from these are noise next to the lookup log
_QUIET_LOGGERS = ("aiohttp", "aiohttp.access", "uvicorn.access")


def configure_logging(app_settings: Settings) -> None:
    """Send logs to the console and, when LOG_DIR is set, to a rotating file.

    The root level comes from LOG_LEVEL. A log directory that cannot be
    created only disables the file handler.
    """
    level = logging.getLevelName(app_settings.log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if app_settings.log_dir:
        log_path = Path(app_settings.log_dir) / LOG_FILE_NAME
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            # 1MB per file, 3 backups
            file_handler = RotatingFileHandler(log_path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        except OSError as e:
            logger.warning("File logging disabled, cannot write to %s: %s", log_path, e)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logger.debug("Writing logs to %s", log_path)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


async def serve(app_settings: Settings) -> None:
    """Serve the lookup page until uvicorn is asked to stop."""
    config = uvicorn.Config(
        app=create_app(app_settings),
        host=app_settings.api_host,
        port=app_settings.api_port,
        log_level=app_settings.log_level.lower(),
        log_config=None,
        loop="asyncio",
    )
    logger.info("Serving invite lookups on http://%s:%s", app_settings.api_host, app_settings.api_port)
    await uvicorn.Server(config).serve()


async def main_async(app_settings: Settings = settings) -> None:
    configure_logging(app_settings)
    validate_settings(app_settings)
    await serve(app_settings)


def main() -> None:
    try:
        asyncio.run(main_async())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
