"""
process_transactions.py
-----------------------
Turn pasted free-text lines such as ``10k dinner`` or ``+20k freelance``
into categorized transactions.  Each line is an amount token followed by
a description; lines that cannot be read are skipped.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from categories import INCOME, OTHER, categorize_transaction
from logging_setup import get_logger
from models import Transaction

logger = get_logger("financial_planner.process_transactions")

# Everything that is not part of a number or the thousands suffix.
AMOUNT_NOISE = re.compile(r"[^0-9.k]")
# Longest leading decimal number, e.g. "1.2" out of "1.2.3".
LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class AmountParseError(ValueError):
    """Raised when an amount token holds no number."""


def parse_amount(amount_str: str) -> float:
    """Convert an amount token into a signed amount.

    A leading ``+`` marks income; anything else is an expense and comes
    back negative.  A trailing ``k`` (either case) multiplies by 1000.

    Raises:
        AmountParseError: if no number can be read from the token.
    """
    is_income = amount_str.startswith("+")
    cleaned = AMOUNT_NOISE.sub("", amount_str.lower())

    multiplier = 1
    if cleaned.endswith("k"):
        cleaned = cleaned[:-1]
        multiplier = 1000

    match = LEADING_NUMBER.match(cleaned)
    if match is None:
        raise AmountParseError(f"No amount in {amount_str!r}")

    amount = float(match.group()) * multiplier
    return amount if is_income else -amount


def parse_line(line: str, index: int) -> Transaction | None:
    """Build a transaction from one line.

    Returns ``None`` for lines without both an amount and a description.
    """
    parts = line.split()
    if len(parts) < 2:
        return None

    amount = parse_amount(parts[0])
    description = " ".join(parts[1:])
    category = INCOME if amount > 0 else categorize_transaction(description)
    return Transaction(
        id=f"transaction-{index}",
        description=description,
        amount=amount,
        category=category,
    )


def parse_raw_data(raw_data: str) -> Tuple[List[Transaction], List[Transaction]]:
    """Parse pasted text into ``(transactions, needs_review)``.

    ``needs_review`` holds, in input order, the transactions that fell
    through to the ``Other`` category.
    """
    transactions: List[Transaction] = []
    needs_review: List[Transaction] = []

    lines = raw_data.split("\n")
    for index, line in enumerate(lines):
        try:
            txn = parse_line(line, index)
        except AmountParseError as exc:
            logger.debug("Skipping line %d: %s", index, exc)
            continue
        if txn is None:
            if line.strip():
                logger.debug("Skipping line %d: no description in %r", index, line)
            continue
        transactions.append(txn)
        if txn.category == OTHER:
            needs_review.append(txn)

    logger.info(
        "Parsed %d transactions from %d lines (%d need review)",
        len(transactions), len(lines), len(needs_review),
    )
    return transactions, needs_review
