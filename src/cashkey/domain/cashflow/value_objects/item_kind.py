"""Side of the cash flow an item belongs to."""

from enum import Enum


class ItemKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
