"""Automatic VAT expense derived from VAT-inclusive income."""

from __future__ import annotations

from collections.abc import Iterable

from cashkey.domain.cashflow.entities import CashflowItem, CashflowState

AUTO_VAT_EXPENSE_ID = "auto-vat-expense"
AUTO_VAT_EXPENSE_NAME = "🧾 VAT (auto)"


def vat_total(incomes: Iterable[CashflowItem]) -> int:
    """Sum of VAT collected on income items."""
    return sum(item.vat_amount or 0 for item in incomes)


def auto_vat_expense(total: int) -> CashflowItem:
    """The synthetic expense that passes collected VAT on."""
    return CashflowItem(
        id=AUTO_VAT_EXPENSE_ID,
        name=AUTO_VAT_EXPENSE_NAME,
        amount=total,
    )


def expenses_with_vat(state: CashflowState) -> list[CashflowItem]:
    """Expenses as the diagram sees them.

    The VAT expense is put first, and only when some VAT was collected.
    """
    total = vat_total(state.incomes)
    if total > 0:
        return [auto_vat_expense(total), *state.expenses]
    return list(state.expenses)
