"""
Runtime configuration read from the process environment.

A .env file in the working directory is loaded first, so local development
can keep the API key out of the shell. All three Google collaborators
(Vision, language detection, translation) share the single GOOGLE_API_KEY.
"""

import os

from dotenv import load_dotenv

load_dotenv()

VISION_API_URL = os.getenv("VISION_API_URL", "https://vision.googleapis.com/v1/images:annotate")
TRANSLATE_API_URL = os.getenv(
    "TRANSLATE_API_URL", "https://translation.googleapis.com/language/translate/v2"
)
HTTP_TIMEOUT_SEC = float(os.getenv("HTTP_TIMEOUT_SEC", "30.0"))

SOURCE_LANG = os.getenv("SOURCE_LANG", "en")  # fragments kept by the language filter
TARGET_LANG = os.getenv("TARGET_LANG", "ko")

MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", str(10 * 1024 * 1024)))  # 10 MiB


def get_api_key() -> str | None:
    """Return the shared Google API key, read at call time."""
    return os.getenv("GOOGLE_API_KEY") or None
