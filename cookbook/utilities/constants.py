from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
CURRENCY: Final[str] = "kr"

# Numeric band encoded in every generated recipe id (prefix * 1000 + n)
CATEGORY_PREFIXES: Final[dict[str, int]] = {
    "Lunch": 0,
    "Dinner": 1,
    "Breakfast": 2,
    "Dessert": 3,
}
RECIPE_ID_BAND: Final[int] = 1000

DAYS_BEFORE_EXPIRY: Final[int] = 5
LOW_STOCK_THRESHOLD: Final[dict[str, float]] = {"g": 50, "ml": 100, "pcs": 2, "kg": 0.2, "liter": 0.2}
