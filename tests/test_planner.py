"""Tests for FinancialPlanner submission and recategorization."""

import pytest

from planner import FinancialPlanner

RAW = '10k dinner\n3k rent\n+20k freelance\n2k gym\n5k movie night'


@pytest.fixture
def planner():
    p = FinancialPlanner()
    p.process_raw_data(RAW)
    return p


def totals_by_name(analysis):
    return {c.name: c.total for c in analysis.categories}


class TestProcessRawData:
    """Tests for submitting raw text."""

    def test_new_planner_is_empty(self):
        p = FinancialPlanner()
        assert p.transactions == []
        assert p.needs_review == []
        assert p.analysis.total_expenses == 0
        assert len(p.analysis.trend) == 4

    def test_populates_state(self, planner):
        assert planner.raw_data == RAW
        assert len(planner.transactions) == 5
        assert [t.description for t in planner.needs_review] == ['rent', 'gym']
        assert planner.analysis.total_income == 20000
        assert planner.analysis.total_expenses == 20000

    def test_resubmission_replaces_transactions(self, planner):
        planner.process_raw_data('+1k tips')

        assert [t.description for t in planner.transactions] == ['tips']
        assert planner.needs_review == []
        assert planner.analysis.categories == []
        assert planner.analysis.total_income == 1000

    def test_resubmitting_same_text_is_idempotent(self, planner):
        before = ([t.model_dump() for t in planner.transactions], planner.analysis)
        planner.process_raw_data(RAW)
        after = ([t.model_dump() for t in planner.transactions], planner.analysis)

        assert before == after

    def test_empty_text(self, planner):
        planner.process_raw_data('')

        assert planner.transactions == []
        assert planner.analysis.total_income == 0
        assert planner.analysis.total_expenses == 0
        assert all(p.income == 0 and p.expenses == 0 for p in planner.analysis.trend)


class TestUpdateCategory:
    """Tests for update_category."""

    def test_moves_other_to_shopping(self, planner):
        before = totals_by_name(planner.analysis)
        assert before['Other'] == 5000
        assert 'Shopping' not in before

        planner.update_category('transaction-1', 'Shopping')

        assert planner.find_transaction('transaction-1').category == 'Shopping'
        assert [t.id for t in planner.needs_review] == ['transaction-3']
        after = totals_by_name(planner.analysis)
        assert after['Shopping'] == 3000
        assert after['Other'] == 2000
        assert planner.analysis.total_expenses == 20000

    def test_last_other_removes_category(self, planner):
        planner.update_category('transaction-1', 'Shopping')
        planner.update_category('transaction-3', 'Recreation')

        assert planner.needs_review == []
        assert 'Other' not in totals_by_name(planner.analysis)
        assert totals_by_name(planner.analysis)['Recreation'] == 7000

    def test_unknown_id_is_noop(self, planner):
        before = planner.analysis
        planner.update_category('transaction-99', 'Shopping')

        assert planner.analysis == before
        assert len(planner.needs_review) == 2

    def test_income_keeps_income_category(self, planner):
        planner.update_category('transaction-2', 'Food')

        assert planner.find_transaction('transaction-2').category == 'Income'
        assert planner.analysis.total_income == 20000

    def test_recategorize_categorized_expense(self, planner):
        """Transactions outside the review list can be moved too."""
        planner.update_category('transaction-0', 'Drinks')

        totals = totals_by_name(planner.analysis)
        assert 'Food' not in totals
        assert totals['Drinks'] == 10000
        assert len(planner.needs_review) == 2
