"""Read-side queries over the cash flow state."""

from cashkey.application.queries.cashflow_summary_query import CashflowSummaryQuery
from cashkey.application.queries.load_state_query import LoadStateQuery
from cashkey.application.queries.sankey_query import (
    BUDGET_LABEL,
    DEFICIT_LABEL,
    SURPLUS_LABEL,
    SankeyQuery,
    build_sankey,
    share_of_budget,
)

__all__ = [
    "BUDGET_LABEL",
    "DEFICIT_LABEL",
    "SURPLUS_LABEL",
    "CashflowSummaryQuery",
    "LoadStateQuery",
    "SankeyQuery",
    "build_sankey",
    "share_of_budget",
]
