"""Cash flow domain services."""

from cashkey.domain.cashflow.services.vat_service import (
    AUTO_VAT_EXPENSE_ID,
    AUTO_VAT_EXPENSE_NAME,
    auto_vat_expense,
    expenses_with_vat,
    vat_total,
)

__all__ = [
    "AUTO_VAT_EXPENSE_ID",
    "AUTO_VAT_EXPENSE_NAME",
    "auto_vat_expense",
    "expenses_with_vat",
    "vat_total",
]
