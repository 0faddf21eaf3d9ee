"""Totals for the summary panel."""

from cashkey.application.dtos.summary_dto import CashflowSummary
from cashkey.domain.cashflow import CashflowState, vat_total


class CashflowSummaryQuery:
    """Summarize income, VAT, expenses and the resulting balance.

    VAT collected on income is counted as an expense, since it is passed on.
    """

    def execute(self, state: CashflowState) -> CashflowSummary:
        total_income = sum(item.amount for item in state.incomes)
        expense_base_total = sum(item.amount for item in state.expenses)
        vat = vat_total(state.incomes)
        total_expense = expense_base_total + vat

        return CashflowSummary(
            total_income=total_income,
            vat_total=vat,
            expense_base_total=expense_base_total,
            total_expense=total_expense,
            balance=total_income - total_expense,
            has_vat=vat > 0,
            show_vat_row=vat > 0 or not state.is_empty(),
        )
