"""Cash flow state: the unit that gets encoded into the address."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, model_validator

from cashkey.domain.cashflow.entities.cashflow_item import CashflowItem
from cashkey.domain.cashflow.value_objects import ItemKind


class CashflowState(BaseModel):
    """All income and expense items, in entry order."""

    incomes: tuple[CashflowItem, ...] = ()
    expenses: tuple[CashflowItem, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_items(self) -> CashflowState:
        seen: set[str] = set()
        for item in self.all_items():
            if item.id in seen:
                msg = f"Duplicate item id: {item.id}"
                raise ValueError(msg)
            seen.add(item.id)

        for expense in self.expenses:
            if expense.vat_included:
                msg = f"Expense {expense.id} cannot carry VAT fields"
                raise ValueError(msg)
        return self

    @classmethod
    def empty(cls) -> CashflowState:
        return cls()

    def is_empty(self) -> bool:
        return not self.incomes and not self.expenses

    def all_items(self) -> Iterator[CashflowItem]:
        yield from self.incomes
        yield from self.expenses

    def items_of(self, kind: ItemKind) -> tuple[CashflowItem, ...]:
        return self.incomes if kind is ItemKind.INCOME else self.expenses

    def find(self, item_id: str) -> tuple[ItemKind, CashflowItem] | None:
        """Locate an item by id, returning the list it lives in."""
        for kind in ItemKind:
            for item in self.items_of(kind):
                if item.id == item_id:
                    return kind, item
        return None

    def with_items(
        self,
        kind: ItemKind,
        items: tuple[CashflowItem, ...] | list[CashflowItem],
    ) -> CashflowState:
        """Return a new state with one side replaced."""
        if kind is ItemKind.INCOME:
            return CashflowState(incomes=tuple(items), expenses=self.expenses)
        return CashflowState(incomes=self.incomes, expenses=tuple(items))
