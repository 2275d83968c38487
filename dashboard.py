# dashboard.py — summary metrics, tables and charts for the planner page

from typing import List

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import COLORS
from models import Analysis, CategorySummary, TrendPoint


def categories_frame(categories: List[CategorySummary]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Category": c.name, "Total": c.total, "Percentage": c.percentage} for c in categories],
        columns=["Category", "Total", "Percentage"],
    )


def trend_frame(trend: List[TrendPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Month": p.month, "Income": p.income, "Expenses": p.expenses} for p in trend],
        columns=["Month", "Income", "Expenses"],
    )


def _kpis(analysis: Analysis, currency: str):
    """
    Displays the Financial Summary row: income, expenses, net and savings rate.
    """
    col1, col2, col3, col4 = st.columns(4)

    col1.metric("💰 Total Income", f"{analysis.total_income:,.2f} {currency}")
    col2.metric("💸 Total Expenses", f"{analysis.total_expenses:,.2f} {currency}")
    col3.metric("🧾 Net", f"{analysis.net:,.2f} {currency}")
    col4.metric("📉 Savings Rate", f"{analysis.savings_rate:.2f}%")


def cat_spend(categories: List[CategorySummary]):
    """
    Donut chart of expense distribution by category.
    """
    by_cat = categories_frame(categories)

    fig = px.pie(
        by_cat,
        values="Total",
        names="Category",
        hole=0.4,
        title="Expense Distribution",
        color_discrete_sequence=COLORS,
    )
    fig.update_traces(textposition="inside", textinfo="percent+label")
    return fig


def income_vs_expense_monthly(trend: List[TrendPoint]):
    """
    Bar chart of Income vs Expenses per (synthetic) month.
    """
    monthly = trend_frame(trend)

    fig = go.Figure()
    fig.add_trace(go.Bar(x=monthly["Month"], y=monthly["Income"], name="Income", marker_color="#8884d8"))
    fig.add_trace(go.Bar(x=monthly["Month"], y=monthly["Expenses"], name="Expenses", marker_color="#82ca9d"))

    fig.update_layout(barmode="group", title="Monthly Trends", height=400)
    return fig
