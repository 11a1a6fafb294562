# File: calsync/core/config_manager.py
"""
Centralized configuration management for calsync.
Loads settings from environment variables and the project directory.
"""

import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from calsync/core/
    LOGS_DIR = BASE_DIR / "logs"

    # Files
    TOKEN_FILE = BASE_DIR / "token.json"
    CREDENTIALS_FILE = BASE_DIR / "credentials.json"
    ENV_FILE = BASE_DIR / ".env"

    # Google Services
    CALENDAR_ID = os.getenv("GOOGLE_CALENDAR_ID", "primary")
    GOOGLE_SCOPES: List[str] = [
        'https://www.googleapis.com/auth/calendar.readonly',
    ]
    PAGE_SIZE = 250

    # Application Settings
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "UTC")
    DEFAULT_USER = os.getenv("CALSYNC_USER")

    # Conversion
    DEFAULT_REMINDER_MINUTES = 30
    RRULE_PREFIX = "DTSTART:"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() in ['1', 'true', 'yes']

    @classmethod
    def validate(cls) -> bool:
        """Validate that everything needed to reach Google Calendar is present."""
        errors = []

        if not cls.CREDENTIALS_FILE.exists():
            errors.append(f"credentials.json not found at {cls.CREDENTIALS_FILE}")

        if not cls.TOKEN_FILE.exists():
            errors.append(f"token.json not found at {cls.TOKEN_FILE} (run with --auth)")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
