"""VAT decomposition of gross income figures."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

# Standard rate applied to VAT-inclusive income entries
VAT_RATE = Decimal("0.2")


@dataclass(frozen=True)
class VatSplit:
    """A gross figure broken down into its net and VAT parts."""

    net: int
    vat: int
    gross: int


def split_gross(gross: int, rate: Decimal = VAT_RATE) -> VatSplit:
    """Split a VAT-inclusive amount into net and VAT.

    The net amount is rounded half up to whole units and the VAT is the
    remainder, so ``net + vat == gross`` always holds.
    """
    net = int(
        (Decimal(gross) / (Decimal(1) + rate)).quantize(
            Decimal(1),
            rounding=ROUND_HALF_UP,
        ),
    )
    return VatSplit(net=net, vat=gross - net, gross=gross)
