"""Cash flow value objects."""

from cashkey.domain.cashflow.value_objects.amount_period import (
    MONTHS_PER_YEAR,
    AmountPeriod,
)
from cashkey.domain.cashflow.value_objects.entered_amount import (
    parse_entered_amount,
)
from cashkey.domain.cashflow.value_objects.item_kind import ItemKind
from cashkey.domain.cashflow.value_objects.vat import VAT_RATE, VatSplit, split_gross

__all__ = [
    "MONTHS_PER_YEAR",
    "VAT_RATE",
    "AmountPeriod",
    "ItemKind",
    "VatSplit",
    "parse_entered_amount",
    "split_gross",
]
