"""Results of state-changing and state-loading operations."""

from dataclasses import dataclass
from enum import Enum

from cashkey.domain.cashflow import CashflowState


@dataclass(frozen=True)
class StateUpdate:
    """New state after a change, with the fragment to write to the address."""

    state: CashflowState
    fragment: str


class StateSource(str, Enum):
    FRAGMENT = "fragment"
    SAMPLE = "sample"
    EMPTY = "empty"


@dataclass(frozen=True)
class LoadedState:
    state: CashflowState
    source: StateSource
