"""
categories.py

Keyword rules used to sort a transaction description into a spending
category.  Rules are checked in order and the first one with a keyword
contained in the lower-cased description wins, so "Dinner and drinks"
lands in Food rather than Drinks.  Descriptions matching nothing fall
through to ``OTHER`` and are flagged for manual review.
"""

from typing import List, Tuple

INCOME = "Income"
OTHER = "Other"

CATEGORY_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("dinner", "lunch", "breakfast"), "Food"),
    (("drinks", "bar"), "Drinks"),
    (("dime", "stock"), "Investments"),
    (("binance", "crypto"), "Crypto"),
    (("gambl", "bet", "casino"), "Gambling"),
    (("shop", "store", "mall", "pants"), "Shopping"),
    (("movie", "game", "entertainment", "concert", "weedzilla"), "Recreation"),
    (("travel", "hotel", "flight"), "Travel"),
]

# Labels the categorizer can return, in rule order
EXPENSE_CATEGORIES = [label for _, label in CATEGORY_RULES] + [OTHER]


def categorize_transaction(description: str) -> str:
    lower_desc = description.lower()
    for keywords, label in CATEGORY_RULES:
        if any(keyword in lower_desc for keyword in keywords):
            return label
    return OTHER
