import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

CURRENCY = os.getenv("FINANCIAL_PLANNER_CURRENCY", "THB")
PAGE_TITLE = os.getenv("FINANCIAL_PLANNER_PAGE_TITLE", "Financial Planner")
LOG_LEVEL = os.getenv("FINANCIAL_PLANNER_LOG_LEVEL", "INFO")

# Pie slice colours, cycled when there are more categories than colours
COLORS = ['#0088FE', '#00C49F', '#FFBB28', '#FF8042', '#8884D8', '#82ca9d', '#a4de6c', '#d0ed57', '#ffc658']
