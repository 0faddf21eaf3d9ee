"""Application DTOs."""

from cashkey.application.dtos.sankey_dto import (
    NodeCategory,
    SankeyData,
    SankeyLink,
    SankeyNode,
)
from cashkey.application.dtos.state_dto import LoadedState, StateSource, StateUpdate
from cashkey.application.dtos.summary_dto import CashflowSummary

__all__ = [
    "CashflowSummary",
    "LoadedState",
    "NodeCategory",
    "SankeyData",
    "SankeyLink",
    "SankeyNode",
    "StateSource",
    "StateUpdate",
]
