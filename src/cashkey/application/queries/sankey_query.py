"""Build Sankey cash-flow data from income and expense items."""

from __future__ import annotations

from collections.abc import Sequence

from cashkey.application.dtos.sankey_dto import (
    NodeCategory,
    SankeyData,
    SankeyLink,
    SankeyNode,
)
from cashkey.domain.cashflow import CashflowItem, CashflowState, expenses_with_vat

# Color palette for Sankey nodes
INCOME_COLOR = "#8E9EF0"  # soft blue
EXPENSE_COLOR = "#9ADCB9"  # soft green
SURPLUS_COLOR = "#9b87f5"  # soft purple
DEFICIT_COLOR = "#F7A097"  # soft red-orange
BUDGET_COLOR = "#F1C40F"  # gold

BUDGET_LABEL = "Budget"
DEFICIT_LABEL = "Deficit"
SURPLUS_LABEL = "Surplus"
DEFICIT_NAME = f"📉 {DEFICIT_LABEL}"
SURPLUS_NAME = f"📈 {SURPLUS_LABEL}"


def share_of_budget(value: int, total_budget: int) -> int:
    """Percentage of the budget, rounded half up to a whole number.

    Computed on integers so results do not depend on float representation.
    A zero budget gives 0.
    """
    if total_budget == 0:
        return 0
    return int((200 * value + total_budget) // (2 * total_budget))


def _label(name: str, percentage: int) -> str:
    return f"{name}\n{percentage}%"


def _item_node(
    item: CashflowItem,
    total_budget: int,
    category: NodeCategory,
    color: str,
) -> SankeyNode:
    percentage = share_of_budget(item.amount, total_budget)
    return SankeyNode(
        name=item.name,
        display_name=_label(item.name, percentage),
        value=item.amount,
        category=category,
        color=color,
        percentage=percentage,
        item_id=item.id,
    )


def _balance_node(  # NOQA: PLR0913
    name: str,
    label: str,
    value: int,
    total_budget: int,
    category: NodeCategory,
    color: str,
) -> SankeyNode:
    percentage = share_of_budget(value, total_budget)
    return SankeyNode(
        name=name,
        display_name=_label(label, percentage),
        value=value,
        category=category,
        color=color,
        percentage=percentage,
    )


def build_sankey(
    incomes: Sequence[CashflowItem],
    expenses: Sequence[CashflowItem],
) -> SankeyData:
    """Turn income and expense items into Sankey nodes and links.

    Layout, left to right: incomes (largest first), a deficit node when
    expenses exceed income, the Budget node, expenses (largest first), and a
    surplus node when income exceeds expenses. Items with equal amounts keep
    their input order.

    The graph is rebuilt from scratch on every call; link endpoints are
    indices into the returned node list. Amounts are taken as they are, so a
    negative amount simply lowers its side's total.
    """
    if not incomes and not expenses:
        return SankeyData()

    total_income = sum(item.amount for item in incomes)
    total_expense = sum(item.amount for item in expenses)
    balance = total_income - total_expense
    total_budget = max(total_income, total_expense)
    has_deficit = balance < 0
    has_surplus = balance > 0

    # sorted() is stable, reverse=True included
    sorted_incomes = sorted(incomes, key=lambda item: item.amount, reverse=True)
    sorted_expenses = sorted(expenses, key=lambda item: item.amount, reverse=True)

    nodes: list[SankeyNode] = []
    links: list[SankeyLink] = []

    nodes.extend(
        _item_node(item, total_budget, NodeCategory.INCOME, INCOME_COLOR)
        for item in sorted_incomes
    )

    deficit_index: int | None = None
    if has_deficit:
        deficit_index = len(nodes)
        nodes.append(
            _balance_node(
                DEFICIT_NAME,
                DEFICIT_LABEL,
                abs(balance),
                total_budget,
                NodeCategory.INCOME,
                DEFICIT_COLOR,
            ),
        )

    budget_index = len(nodes)
    nodes.append(
        SankeyNode(
            name=BUDGET_LABEL,
            display_name=BUDGET_LABEL,
            value=total_budget,
            category=NodeCategory.BALANCE,
            color=BUDGET_COLOR,
        ),
    )

    expense_start = len(nodes)
    nodes.extend(
        _item_node(item, total_budget, NodeCategory.EXPENSE, EXPENSE_COLOR)
        for item in sorted_expenses
    )

    surplus_index: int | None = None
    if has_surplus:
        surplus_index = len(nodes)
        nodes.append(
            _balance_node(
                SURPLUS_NAME,
                SURPLUS_LABEL,
                balance,
                total_budget,
                NodeCategory.BALANCE,
                SURPLUS_COLOR,
            ),
        )

    for idx, item in enumerate(sorted_incomes):
        links.append(SankeyLink(source=idx, target=budget_index, value=item.amount))

    if deficit_index is not None:
        links.append(
            SankeyLink(source=deficit_index, target=budget_index, value=abs(balance)),
        )

    for idx, item in enumerate(sorted_expenses):
        links.append(
            SankeyLink(
                source=budget_index,
                target=expense_start + idx,
                value=item.amount,
            ),
        )

    if surplus_index is not None:
        links.append(
            SankeyLink(source=budget_index, target=surplus_index, value=balance),
        )

    return SankeyData(
        nodes=nodes,
        links=links,
        total_income=total_income,
        total_expense=total_expense,
        balance=balance,
        total_budget=total_budget,
    )


class SankeyQuery:
    """Generate the Sankey diagram for a whole cash flow state."""

    def __init__(self, include_vat: bool = True):
        self._include_vat = include_vat

    def execute(self, state: CashflowState) -> SankeyData:
        expenses = (
            expenses_with_vat(state) if self._include_vat else list(state.expenses)
        )
        return build_sankey(state.incomes, expenses)
