"""Sankey diagram DTOs for cash flow visualization."""

from dataclasses import dataclass, field
from enum import Enum


class NodeCategory(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
    BALANCE = "balance"


@dataclass(frozen=True)
class SankeyNode:
    """A node in the Sankey diagram.

    Nodes are income items (plus the deficit), the central Budget node,
    expense items (plus the surplus). ``item_id`` points back to the
    originating item and is None for synthesized nodes.
    """

    name: str
    display_name: str
    value: int
    category: NodeCategory
    color: str
    percentage: int | None = None
    item_id: str | None = None


@dataclass(frozen=True)
class SankeyLink:
    """A flow between two nodes, addressed by index into ``SankeyData.nodes``."""

    source: int
    target: int
    value: int


@dataclass
class SankeyData:
    """Complete data structure for a Sankey diagram."""

    nodes: list[SankeyNode] = field(default_factory=list)
    links: list[SankeyLink] = field(default_factory=list)
    total_income: int = 0
    total_expense: int = 0
    balance: int = 0
    total_budget: int = 0

    def is_empty(self) -> bool:
        return not self.nodes
