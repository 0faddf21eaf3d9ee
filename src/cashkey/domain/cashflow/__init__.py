"""Cash flow domain: line items, state and VAT rules."""

from cashkey.domain.cashflow.entities import CashflowItem, CashflowState, new_item_id
from cashkey.domain.cashflow.exceptions import ItemNotFoundError
from cashkey.domain.cashflow.sample import sample_state
from cashkey.domain.cashflow.services import (
    AUTO_VAT_EXPENSE_ID,
    AUTO_VAT_EXPENSE_NAME,
    auto_vat_expense,
    expenses_with_vat,
    vat_total,
)
from cashkey.domain.cashflow.value_objects import (
    VAT_RATE,
    AmountPeriod,
    ItemKind,
    VatSplit,
    parse_entered_amount,
    split_gross,
)

__all__ = [
    "AUTO_VAT_EXPENSE_ID",
    "AUTO_VAT_EXPENSE_NAME",
    "VAT_RATE",
    "AmountPeriod",
    "CashflowItem",
    "CashflowState",
    "ItemKind",
    "ItemNotFoundError",
    "VatSplit",
    "auto_vat_expense",
    "expenses_with_vat",
    "new_item_id",
    "parse_entered_amount",
    "sample_state",
    "split_gross",
    "vat_total",
]
