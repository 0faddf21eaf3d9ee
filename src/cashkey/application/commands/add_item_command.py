"""Add an income or expense item."""

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
    AmountPeriod,
    CashflowItem,
    CashflowState,
    ItemKind,
)

logger = logging.getLogger(__name__)


class AddItemCommand:
    """Append a new item to one side of the cash flow."""

    def __init__(self, codec: StateCodecPort, vat_rate: Decimal = VAT_RATE):
        self._codec = codec
        self._vat_rate = vat_rate

    def execute(  # NOQA: PLR0913
        self,
        state: CashflowState,
        kind: ItemKind,
        name: str,
        amount: str | int,
        period: AmountPeriod = AmountPeriod.ANNUAL,
        vat_included: bool = False,
    ) -> StateUpdate:
        name = require_name(name)
        entered = period.annualize(require_amount(amount))
        require_vat_allowed(kind, vat_included)

        if vat_included:
            item = CashflowItem.from_gross(name, entered, vat_rate=self._vat_rate)
        else:
            item = CashflowItem.create(name, entered)

        new_state = state.with_items(kind, (*state.items_of(kind), item))
        logger.info("Added %s item %s (amount=%d)", kind.value, item.id, item.amount)
        return StateUpdate(state=new_state, fragment=self._codec.encode(new_state))
