"""Period an entered amount refers to."""

from enum import Enum

MONTHS_PER_YEAR = 12


class AmountPeriod(str, Enum):
    """Entry period. Items are always stored as annual figures."""

    ANNUAL = "annual"
    MONTHLY = "monthly"

    def annualize(self, amount: int) -> int:
        if self is AmountPeriod.MONTHLY:
            return amount * MONTHS_PER_YEAR
        return amount
