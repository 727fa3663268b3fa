"""
Configuration settings for the .gan parser.
Load configuration from environment variables or a .env file.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_file = Path(__file__).parent.parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)


class Settings:
    """Application settings loaded from environment variables."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent.parent

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # ============================================================================
    # Parser limits
    # ============================================================================
    # Consecutive non-workdays add_workdays may step over before giving up
    MAX_WORKDAY_SCAN_DAYS = int(os.getenv('GAN_MAX_WORKDAY_SCAN_DAYS', '3650'))
    # Deepest <task> nesting accepted by the validator
    MAX_TASK_DEPTH = int(os.getenv('GAN_MAX_TASK_DEPTH', '100'))

    @classmethod
    def validate_required_settings(cls) -> list[str]:
        """
        Validate that all settings hold usable values.
        Returns list of problems found.
        """
        problems = []

        if cls.MAX_WORKDAY_SCAN_DAYS <= 0:
            problems.append('GAN_MAX_WORKDAY_SCAN_DAYS must be positive')
        if cls.MAX_TASK_DEPTH <= 0:
            problems.append('GAN_MAX_TASK_DEPTH must be positive')

        return problems


# Create settings instance
settings = Settings()
