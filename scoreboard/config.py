import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Scoreboard process settings"""

    # Logging settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    # Reference date settings
    TIMEZONE = os.getenv('TIMEZONE', 'UTC')

    # Optional JSON file with tunable overrides (see ConfigurationService)
    SCOREBOARD_CONFIG_PATH = os.getenv('SCOREBOARD_CONFIG_PATH', '')

    @classmethod
    def get_log_level(cls) -> str:
        """Get the effective log level name"""
        if cls.DEBUG:
            return 'DEBUG'
        return cls.LOG_LEVEL

    @classmethod
    def validate(cls):
        """Validate that configured values are usable"""
        if cls.LOG_LEVEL not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got '{cls.LOG_LEVEL}'")
        if not cls.TIMEZONE:
            raise ValueError("TIMEZONE is required")
