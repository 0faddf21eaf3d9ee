"""API schemas."""

from cashkey.presentation.api.schemas.cashflow import (
    AddItemRequest,
    CashflowItemResponse,
    EditItemRequest,
    SankeyLinkResponse,
    SankeyNodeResponse,
    SankeyResponse,
    StateResponse,
    SummaryResponse,
)

__all__ = [
    "AddItemRequest",
    "CashflowItemResponse",
    "EditItemRequest",
    "SankeyLinkResponse",
    "SankeyNodeResponse",
    "SankeyResponse",
    "StateResponse",
    "SummaryResponse",
]
