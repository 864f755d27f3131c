"""
Configuration module for Meridian Portal.
Centralizes all configuration settings and environment variables.
"""

import os
import logging
import logging.handlers
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Main configuration class for the portal."""

    # Server Settings
    APP_TITLE: str = os.getenv("APP_TITLE", "Meridian Portal")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8050"))

    # Display Settings
    LOCALE: str = "en-US"
    DEFAULT_PRECISION: int = int(os.getenv("DEFAULT_PRECISION", "2"))
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "USD")
    DISPLAY_TIMEZONE: str = os.getenv("DISPLAY_TIMEZONE", "UTC")
    TABLE_EMPTY_MESSAGE: str = os.getenv("TABLE_EMPTY_MESSAGE", "No data available")

    # Theme Settings
    DEFAULT_THEME: str = os.getenv("DEFAULT_THEME", "light")
    THEME_STORAGE_KEY: str = os.getenv("THEME_STORAGE_KEY", "theme")

    # Development Settings
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    LOG_FILE: str = os.getenv("LOG_FILE", "meridian_portal.log")
    LOG_MAX_BYTES: int = int(os.getenv("LOG_MAX_BYTES", "10485760"))  # 10MB
    LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    @classmethod
    def setup_logging(cls) -> None:
        """
        Configure application logging with file and console handlers.
        """
        logger = logging.getLogger()
        level = getattr(logging, cls.LOG_LEVEL.upper(), logging.INFO)
        logger.setLevel(level)

        # Clear any existing handlers
        logger.handlers.clear()

        formatter = logging.Formatter(cls.LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # File handler with rotation
        file_handler = logging.handlers.RotatingFileHandler(
            cls.LOG_FILE,
            maxBytes=cls.LOG_MAX_BYTES,
            backupCount=cls.LOG_BACKUP_COUNT
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logging.getLogger("werkzeug").setLevel(logging.WARNING)  # Reduce Flask noise

        logger.info(f"{cls.APP_TITLE} logging at {logging.getLevelName(level)}, writing to {cls.LOG_FILE}")
        logger.debug(
            f"Display defaults: locale={cls.LOCALE}, currency={cls.DEFAULT_CURRENCY}, "
            f"precision={cls.DEFAULT_PRECISION}, timezone={cls.DISPLAY_TIMEZONE}, theme={cls.DEFAULT_THEME}"
        )


# Create singleton instance
config = Config()
