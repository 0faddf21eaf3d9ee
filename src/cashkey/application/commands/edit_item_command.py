"""Edit an existing item in place."""

from __future__ import annotations

import logging
from decimal import Decimal

from cashkey.application.commands.item_input import (
    require_amount,
    require_name,
    require_vat_allowed,
)
from cashkey.application.dtos.state_dto import StateUpdate
from cashkey.application.ports import StateCodecPort
from cashkey.domain.cashflow import (
    VAT_RATE,
    CashflowState,
    ItemNotFoundError,
)

logger = logging.getLogger(__name__)


class EditItemCommand:
    """Rename an item or change its amount, keeping its id and position.

    For income with VAT included, ``amount`` is the gross figure and the
    net and VAT parts are derived again. Leaving ``vat_included`` as None
    keeps the item's current setting.
    """

    def __init__(self, codec: StateCodecPort, vat_rate: Decimal = VAT_RATE):
        self._codec = codec
        self._vat_rate = vat_rate

    def execute(
        self,
        state: CashflowState,
        item_id: str,
        name: str,
        amount: str | int,
        vat_included: bool | None = None,
    ) -> StateUpdate:
        found = state.find(item_id)
        if found is None:
            raise ItemNotFoundError(item_id)
        kind, current = found

        name = require_name(name)
        entered = require_amount(amount)
        if vat_included is None:
            vat_included = current.vat_included
        require_vat_allowed(kind, vat_included)

        edited = current.with_entry(
            name,
            entered,
            vat_included=vat_included,
            vat_rate=self._vat_rate,
        )
        items = tuple(
            edited if item.id == item_id else item for item in state.items_of(kind)
        )
        new_state = state.with_items(kind, items)
        logger.info("Edited %s item %s", kind.value, item_id)
        return StateUpdate(state=new_state, fragment=self._codec.encode(new_state))
