import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_PORT = 3000

REQUIRED_KEYS = ("SPREADSHEET_ID",)


class Config:
    """Settings read from the environment (and .env) at import time."""

    SPREADSHEET_ID = os.getenv("SPREADSHEET_ID")
    SHEET_NAME = os.getenv("SHEET_NAME") or DEFAULT_SHEET_NAME
    GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    PORT = int(os.getenv("PORT", DEFAULT_PORT))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_config(config) -> list:
    """Return the required keys that are missing or empty in ``config``."""
    return [key for key in REQUIRED_KEYS if not config.get(key)]
