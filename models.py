from typing import List

from pydantic import BaseModel, Field

# --- Records ---

class Transaction(BaseModel):
    id: str                 # 'transaction-<line index>'
    description: str
    amount: float           # positive = income, negative = expense
    category: str


class CategorySummary(BaseModel):
    name: str
    total: float            # sum of absolute expense amounts
    percentage: float       # share of total expenses, 0-100


class TrendPoint(BaseModel):
    month: str
    income: float
    expenses: float


class Analysis(BaseModel):
    """Everything derived from one transaction list."""

    categories: List[CategorySummary] = Field(default_factory=list)
    total_income: float = 0.0
    total_expenses: float = 0.0
    net: float = 0.0
    savings_rate: float = 0.0
    insight: str = ""
    trend: List[TrendPoint] = Field(default_factory=list)
