"""Delete an item."""

from __future__ import annotations

import logging

from cashkey.application.dtos.state_dto import StateUpdate
from cashkey.application.ports import StateCodecPort
from cashkey.domain.cashflow import CashflowState, ItemNotFoundError

logger = logging.getLogger(__name__)


class DeleteItemCommand:
    """Remove an item from whichever side holds it."""

    def __init__(self, codec: StateCodecPort):
        self._codec = codec

    def execute(self, state: CashflowState, item_id: str) -> StateUpdate:
        found = state.find(item_id)
        if found is None:
            raise ItemNotFoundError(item_id)
        kind, _ = found

        items = tuple(item for item in state.items_of(kind) if item.id != item_id)
        new_state = state.with_items(kind, items)
        logger.info("Deleted %s item %s", kind.value, item_id)
        return StateUpdate(state=new_state, fragment=self._codec.encode(new_state))
