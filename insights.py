from typing import List, Sequence

import pandas as pd

from models import Analysis, CategorySummary, Transaction, TrendPoint

# (month, income multiplier, expense multiplier)
TREND_MULTIPLIERS = [
    ("Jan", 0.9, 0.8),
    ("Feb", 0.95, 0.9),
    ("Mar", 1.0, 1.0),
    ("Apr", 1.05, 1.1),
]

NO_EXPENSES_TEXT = "You don't have any expenses recorded. "
SAVING_TEXT = "Good job! You're saving money this period."
REDUCE_TEXT = "You might want to consider reducing your expenses to save more."


def transactions_to_df(transactions: Sequence[Transaction]) -> pd.DataFrame:
    if not transactions:
        return pd.DataFrame(columns=["ID", "Description", "Amount", "Category"])

    return pd.DataFrame(
        [
            {
                "ID": t.id,
                "Description": t.description,
                "Amount": t.amount,
                "Category": t.category,
            }
            for t in transactions
        ]
    )


def summarize_categories(df: pd.DataFrame):
    """Return ``(categories, total_income, total_expenses)`` for a transaction frame.

    Categories keep the order in which they first appear among the
    expenses.  Income rows never contribute to a category total.
    """
    if df.empty:
        return [], 0.0, 0.0

    amounts = df["Amount"].astype(float)
    income = float(amounts[amounts > 0].sum())

    expense_rows = df[amounts <= 0].assign(AbsAmount=lambda x: x["Amount"].astype(float).abs())
    expenses = float(expense_rows["AbsAmount"].sum())

    by_cat = expense_rows.groupby("Category", sort=False)["AbsAmount"].sum()
    categories = [
        CategorySummary(
            name=name,
            total=float(total),
            percentage=(float(total) / expenses * 100) if expenses > 0 else 0.0,
        )
        for name, total in by_cat.items()
    ]
    return categories, income, expenses


def generate_insight(categories: List[CategorySummary], total_income: float, total_expenses: float) -> str:
    """Templated summary: the top spending category plus a savings remark."""
    if categories:
        # max() keeps the first of equally large totals
        highest = max(categories, key=lambda c: c.total)
        text = (
            f"Your highest spending category is {highest.name}, accounting for "
            f"{highest.percentage:.2f}% of your total expenses. "
        )
    else:
        text = NO_EXPENSES_TEXT

    text += SAVING_TEXT if total_income > total_expenses else REDUCE_TEXT
    return text


def monthly_trend(total_income: float, total_expenses: float) -> List[TrendPoint]:
    """Four placeholder months scaled from the current totals."""
    return [
        TrendPoint(month=month, income=total_income * inc, expenses=total_expenses * exp)
        for month, inc, exp in TREND_MULTIPLIERS
    ]


def analyze_transactions(transactions: Sequence[Transaction]) -> Analysis:
    """Derive category totals, income/expense split, insight and trend."""
    df = transactions_to_df(transactions)
    categories, income, expenses = summarize_categories(df)

    net = income - expenses
    savings_rate = (net / income * 100) if income > 0 else 0.0

    return Analysis(
        categories=categories,
        total_income=income,
        total_expenses=expenses,
        net=net,
        savings_rate=savings_rate,
        insight=generate_insight(categories, income, expenses),
        trend=monthly_trend(income, expenses),
    )
