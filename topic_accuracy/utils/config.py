# topic_accuracy/utils/config.py
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file before defining settings
load_dotenv()

class Settings(BaseSettings):
    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./topic_accuracy.db"
    database_echo: bool = False  # Set to True to see SQL queries

    # Logging
    log_level: str = "INFO"

    # Reporting
    accuracy_round_digits: int | None = 2  # None returns the exact percentage

    # Startup
    seed_demo_data: bool = False

settings = Settings()

# --- Validation ---
if settings.accuracy_round_digits is not None and settings.accuracy_round_digits < 0:
    raise ValueError("ACCURACY_ROUND_DIGITS must be a non-negative integer")
