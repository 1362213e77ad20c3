import logging
import os
from logging.handlers import RotatingFileHandler
from resource_finder.config import settings

class LoggerConfig:
    """
    Logger setup for the finder page. Streamlit reruns the script on every
    interaction, so handlers are attached only once per process.
    """
    def __init__(
        self, env=20, logger_name="ResourceFinder", log_directory="logs", log_file="finder.log"
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

    def setup_logger(self):
        try:
            if not self.logger.hasHandlers():
                formatter = logging.Formatter(self.log_format)

                console_handler = logging.StreamHandler()
                console_handler.setLevel(self.env)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)

                if self.log_directory:
                    os.makedirs(self.log_directory, exist_ok=True)
                    file_handler = RotatingFileHandler(
                        os.path.join(self.log_directory, self.log_file),
                        backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
                    )
                    file_handler.setLevel(self.env)
                    file_handler.setFormatter(formatter)
                    self.logger.addHandler(file_handler)

            self.logger.setLevel(self.env)
            # Streamlit configures the root logger too
            self.logger.propagate = False

        except Exception as e:
            print(f"Failed to setup logger handlers: {str(e)}")

    def log(self, level: int, message: str, extra: dict = None):
        """Simple wrapper to log messages"""
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message)

logs = LoggerConfig(
    env=settings.LOGGER,
    logger_name="FINDER-FE",
    log_directory=settings.LOG_DIRECTORY,
)
