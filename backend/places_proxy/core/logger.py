import logging
import os
from logging.handlers import RotatingFileHandler
from places_proxy.core.config import settings

class LoggerConfig:
    """
    Logger setup for the proxy: console always, rotating file when a
    log directory is configured.
    """
    def __init__(
        self, env=20, logger_name="PlacesProxy", log_directory="logs", log_file="proxy.log"
    ):
        try:
            self.logger_name = logger_name
            self.log_directory = os.path.abspath(log_directory) if log_directory else None
            self.log_file = log_file
            self.env = env
            self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

            self.logger = logging.getLogger(self.logger_name)
            self.setup_logger()
        except Exception as e:
            print(f"Failed to initialize logger: {str(e)}")

    def _build_handlers(self) -> list[logging.Handler]:
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if self.log_directory:
            os.makedirs(self.log_directory, exist_ok=True)
            handlers.append(RotatingFileHandler(
                os.path.join(self.log_directory, self.log_file),
                backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
            ))
        return handlers

    def setup_logger(self):
        try:
            formatter = logging.Formatter(self.log_format)

            # Avoid adding duplicate handlers if re-initialized
            if not self.logger.hasHandlers():
                for handler in self._build_handlers():
                    handler.setLevel(self.env)
                    handler.setFormatter(formatter)
                    self.logger.addHandler(handler)

            self.logger.setLevel(self.env)

        except Exception as e:
            print(f"Failed to setup logger handlers: {str(e)}")

    def log(self, level: int, message: str, extra: dict = None):
        """Simple wrapper to log messages"""
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message)

logs = LoggerConfig(
    env=settings.LOGGER,
    logger_name="PROXY-BE",
    log_directory=settings.LOG_DIRECTORY,
)
