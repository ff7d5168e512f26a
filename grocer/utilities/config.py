"""Configuration management for the Grocer application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from grocer.utilities.errors import MissingConfiguration

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

# AI service
OPENAI_API_KEY: Final[str] = os.getenv('OPENAI_API_KEY', '')
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('GROCER_DATA_DIR', str(BASE_DIR / 'data')))


def require_api_key(api_key: str | None = None) -> str:
    """Return the AI credential or fail hard; the app must not start without it."""
    key = api_key if api_key is not None else os.getenv('OPENAI_API_KEY', OPENAI_API_KEY)
    if not key or not key.strip():
        raise MissingConfiguration("OPENAI_API_KEY environment variable is not set")
    return key
