# backend/app/config.py
"""Runtime settings, read once from the environment (and an optional .env file)."""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR.parent / ".env")

DATA_DIR = Path(os.getenv("BUDGET_DATA_DIR", BASE_DIR / "data"))

DATABASE_URL = os.getenv("BUDGET_DATABASE_URL", f"sqlite:///{DATA_DIR / 'app.db'}")

LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("BUDGET_CORS_ORIGINS", "*").split(",") if o.strip()]

CURRENCY_SYMBOL = os.getenv("BUDGET_CURRENCY_SYMBOL", "₹")

# minimum rapidfuzz score for mapping a free-text category onto a known one
CATEGORY_MATCH_THRESHOLD = int(os.getenv("BUDGET_CATEGORY_MATCH_THRESHOLD", "80"))


def ensure_data_directories() -> None:
    """Create the sqlite folder when the database lives in a file."""
    if DATABASE_URL.startswith("sqlite:///"):
        db_file = Path(DATABASE_URL[len("sqlite:///"):])
        db_file.parent.mkdir(parents=True, exist_ok=True)
