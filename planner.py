"""Per-session planner state: the parsed transactions and what is derived from them."""

from typing import List, Optional

from insights import analyze_transactions
from logging_setup import get_logger
from models import Analysis, Transaction
from process_transactions import parse_raw_data

logger = get_logger("financial_planner.planner")


class FinancialPlanner:
    """Holds the transaction list and keeps ``analysis`` in step with it.

    Every method that changes ``transactions`` re-runs the aggregation
    before returning, so readers never see totals from an older list.
    """

    def __init__(self):
        self.raw_data: str = ""
        self.transactions: List[Transaction] = []
        self.needs_review: List[Transaction] = []
        self.analysis: Analysis = analyze_transactions([])

    def process_raw_data(self, raw_data: str) -> None:
        """Replace all transactions with those parsed from ``raw_data``."""
        self.raw_data = raw_data
        self.transactions, self.needs_review = parse_raw_data(raw_data)
        self._refresh()

    def find_transaction(self, transaction_id: str) -> Optional[Transaction]:
        for txn in self.transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def update_category(self, transaction_id: str, new_category: str) -> None:
        """Override a transaction's category and drop it from the review list.

        Unknown ids are ignored.  Income keeps its ``Income`` category.
        """
        txn = self.find_transaction(transaction_id)
        if txn is None:
            return
        if txn.amount > 0:
            logger.warning("Ignoring recategorization of income transaction %s", transaction_id)
            return

        logger.info("Recategorized %s: %s -> %s", transaction_id, txn.category, new_category)
        txn.category = new_category
        self.needs_review = [t for t in self.needs_review if t.id != transaction_id]
        self._refresh()

    def _refresh(self) -> None:
        self.analysis = analyze_transactions(self.transactions)
