"""Cash flow entities."""

from cashkey.domain.cashflow.entities.cashflow_item import CashflowItem, new_item_id
from cashkey.domain.cashflow.entities.cashflow_state import CashflowState

__all__ = ["CashflowItem", "CashflowState", "new_item_id"]
