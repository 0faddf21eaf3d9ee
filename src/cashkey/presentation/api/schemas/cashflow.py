"""Pydantic schemas for cash flow endpoints.

These schemas define the request and response structure of the API,
shaped for Sankey chart libraries on the frontend.
"""

from pydantic import BaseModel, ConfigDict, Field

from cashkey.domain.cashflow import AmountPeriod, CashflowItem, ItemKind


class CashflowItemResponse(BaseModel):
    """One income or expense line."""

    id: str = Field(description="Opaque item identifier")
    name: str = Field(description="Free-form label")
    amount: int = Field(description="Annual amount in whole units (net for VAT income)")
    vat_included: bool = Field(default=False, description="Entered as a VAT-inclusive figure")
    vat_amount: int | None = Field(default=None, description="VAT part, VAT items only")
    gross_amount: int | None = Field(default=None, description="Amount plus VAT, VAT items only")

    @classmethod
    def from_item(cls, item: CashflowItem) -> "CashflowItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            amount=item.amount,
            vat_included=item.vat_included,
            vat_amount=item.vat_amount,
            gross_amount=item.gross_amount,
        )


class StateResponse(BaseModel):
    """A cash flow state together with its address representation."""

    incomes: list[CashflowItemResponse]
    expenses: list[CashflowItemResponse]
    fragment: str = Field(description="Encoded state for the address fragment")
    share_url: str = Field(description="Full address that restores this state")
    source: str = Field(
        default="fragment",
        description="Where the state came from: 'fragment', 'sample' or 'empty'",
    )


class SankeyNodeResponse(BaseModel):
    """A node in the Sankey diagram."""

    name: str = Field(description="Node name (item name, 'Budget', '📈 Surplus', ...)")
    display_name: str = Field(description="Label with percentage on a second line")
    value: int = Field(description="Amount flowing through the node")
    percentage: int | None = Field(default=None, description="Share of the budget")
    item_id: str | None = Field(default=None, description="Originating item, if any")
    category: str = Field(description="Node type: 'income', 'expense' or 'balance'")
    color: str = Field(description="Hex color for the node")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "💼 Client",
                "display_name": "💼 Client\n60%",
                "value": 600,
                "percentage": 60,
                "item_id": "3f0c6c1e-9d7b-4f55-9d53-7f3c1f0b2a11",
                "category": "income",
                "color": "#8E9EF0",
            }
        }
    )


class SankeyLinkResponse(BaseModel):
    """A flow between two nodes, addressed by node index."""

    source: int = Field(description="Index of the source node")
    target: int = Field(description="Index of the target node")
    value: int = Field(description="Flow amount")


class SankeyResponse(BaseModel):
    """Sankey diagram data for cash flow visualization.

    **Flow structure:**
    ```
    Incomes (+ Deficit) → Budget → Expenses (+ Surplus)
    ```
    """

    nodes: list[SankeyNodeResponse]
    links: list[SankeyLinkResponse]
    total_income: int
    total_expense: int
    balance: int = Field(description="Income minus expenses (can be negative)")
    total_budget: int = Field(description="Larger of income and expenses")
    source: str = Field(description="Where the state came from")


class SummaryResponse(BaseModel):
    """Totals shown next to the diagram."""

    total_income: int
    vat_total: int
    expense_base_total: int
    total_expense: int = Field(description="Expenses including collected VAT")
    balance: int
    is_surplus: bool
    has_vat: bool
    show_vat_row: bool
    source: str


class AddItemRequest(BaseModel):
    """Add an income or expense line to the given state."""

    state: str | None = Field(default=None, description="Current encoded state")
    kind: ItemKind
    name: str
    amount: int | str = Field(description="Whole amount; separators are ignored")
    period: AmountPeriod = AmountPeriod.ANNUAL
    vat_included: bool = False


class EditItemRequest(BaseModel):
    """Edit an existing line of the given state."""

    state: str | None = Field(default=None, description="Current encoded state")
    name: str
    amount: int | str = Field(description="Entered amount, gross when VAT is included")
    vat_included: bool | None = None
