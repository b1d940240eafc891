# backend/app/models/category_model.py
import logging
from typing import Optional

from rapidfuzz import process, fuzz, utils

from backend.app.config import CATEGORY_MATCH_THRESHOLD

logger = logging.getLogger(__name__)

# The one category set shared by transactions and budgets
CATEGORIES = (
    "Food",
    "Education",
    "Transport",
    "Utilities",
    "Entertainment",
    "Other",
)

DEFAULT_CATEGORY = "Other"

KEYWORDS = {
    "Food": ["zomato", "swiggy", "dominos", "pizza", "restaurant", "cafe", "coffee",
             "grocer", "supermarket", "lunch", "dinner", "breakfast", "meal", "food"],
    "Education": ["school", "college", "tuition", "course", "udemy", "coursera",
                  "book", "exam", "fees", "stationery"],
    "Transport": ["uber", "ola", "cab", "taxi", "metro", "bus", "train", "fuel",
                  "petrol", "diesel", "parking", "toll", "flight"],
    "Utilities": ["electricity", "water bill", "gas bill", "internet", "broadband",
                  "wifi", "mobile recharge", "phone bill"],
    "Entertainment": ["netflix", "hotstar", "prime", "spotify", "pvr", "movie",
                      "cinema", "concert", "game", "youtube premium"],
}


def normalize_category(name: Optional[str]) -> Optional[str]:
    """Map free text onto a canonical category, or None when nothing is close enough."""
    if not name or not name.strip():
        return None
    cleaned = name.strip()
    for cat in CATEGORIES:
        if cat.lower() == cleaned.lower():
            return cat
    match = process.extractOne(cleaned, CATEGORIES, scorer=fuzz.WRatio,
                                 processor=utils.default_process)
    if match and match[1] >= CATEGORY_MATCH_THRESHOLD:
        logger.debug("Matched category %r to %r (score %.0f)", cleaned, match[0], match[1])
        return match[0]
    return None


def classify_description(description: str) -> str:
    s = (description or "").lower()
    for category, words in KEYWORDS.items():
        if any(k in s for k in words):
            return category
    return DEFAULT_CATEGORY


def classify_transactions(descriptions: list[str]):
    return [{"description": desc, "predicted_category": classify_description(desc)}
            for desc in descriptions]
