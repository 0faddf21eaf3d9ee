"""State codec port.

Commands and queries depend on this contract rather than on a concrete
encoding, so the address format can change without touching them.
"""

from __future__ import annotations

from typing import Protocol

from cashkey.domain.cashflow import CashflowState


class StateCodecPort(Protocol):
    """Serializes the whole cash flow state to a URL-safe string."""

    def encode(self, state: CashflowState) -> str:
        """Encode the state. Equal states give equal strings."""
        ...

    def decode(self, fragment: str | None) -> CashflowState | None:
        """Decode a fragment, or None when absent or unreadable. Never raises."""
        ...
