"""Cash flow totals shown next to the diagram."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CashflowSummary:
    total_income: int
    vat_total: int
    expense_base_total: int
    total_expense: int  # includes VAT
    balance: int
    has_vat: bool
    show_vat_row: bool

    @property
    def is_surplus(self) -> bool:
        return self.balance >= 0
