import streamlit as st
from pathlib import Path
import sys

# Add current directory to path
sys.path.append(str(Path(__file__).parent))

from config import CURRENCY, LOG_LEVEL, PAGE_TITLE
from categories import EXPENSE_CATEGORIES, OTHER
from dashboard import _kpis, cat_spend, categories_frame, income_vs_expense_monthly
from insights import transactions_to_df
from logging_setup import configure_logging
from planner import FinancialPlanner

# --- Configuration ---
st.set_page_config(page_title=PAGE_TITLE, layout="wide", page_icon="💰")
configure_logging(LOG_LEVEL)

# --- Planner State ---
if "planner" not in st.session_state:
    st.session_state.planner = FinancialPlanner()

def get_planner() -> FinancialPlanner:
    return st.session_state.planner

planner = get_planner()

st.title(f"💰 {PAGE_TITLE}")

# --- Input ---
st.header("Enter Raw Financial Data")
raw_data = st.text_area(
    "Raw financial data",
    value=planner.raw_data,
    placeholder="Paste your raw financial data here. Format: amount description (e.g., '10k dinner' or '+20k freelance')",
    height=250,
    label_visibility="collapsed",
)
if st.button("Process Data", type="primary"):
    planner.process_raw_data(raw_data)

if not planner.transactions:
    st.stop()

analysis = planner.analysis

# --- Summary ---
st.header("Financial Summary")
_kpis(analysis, CURRENCY)

st.subheader("Transactions")
txn_df = transactions_to_df(planner.transactions).drop(columns=["ID"])
st.dataframe(
    txn_df.style.format({"Amount": "{:,.2f}"}),
    use_container_width=True,
    hide_index=True,
)

st.subheader("Spending by Category")
cat_df = categories_frame(analysis.categories).rename(columns={"Total": f"Total ({CURRENCY})"})
st.dataframe(
    cat_df.style.format({f"Total ({CURRENCY})": "{:,.2f}", "Percentage": "{:.2f}%"}),
    use_container_width=True,
    hide_index=True,
)

col1, col2 = st.columns(2)
with col1:
    if analysis.categories:
        st.plotly_chart(cat_spend(analysis.categories), use_container_width=True)
    else:
        st.info("No expenses to chart.")
with col2:
    st.plotly_chart(income_vs_expense_monthly(analysis.trend), use_container_width=True)

st.subheader("🧠 AI Insight")
st.write(analysis.insight)

# --- Manual Review ---
if planner.needs_review:
    st.subheader("🔍 Needs Review")
    st.caption("These transactions didn't match any category. Pick one to include them in the breakdown.")
    for txn in planner.needs_review:
        desc_col, amount_col, cat_col, btn_col = st.columns([3, 1, 2, 1])
        desc_col.markdown(f"**{txn.description}**")
        amount_col.write(f"{txn.amount:,.2f} {CURRENCY}")
        choice = cat_col.selectbox(
            "Category",
            EXPENSE_CATEGORIES,
            index=EXPENSE_CATEGORIES.index(OTHER),
            key=f"category_{txn.id}",
            label_visibility="collapsed",
        )
        if btn_col.button("Update", key=f"update_{txn.id}") and choice != OTHER:
            planner.update_category(txn.id, choice)
            st.rerun()
