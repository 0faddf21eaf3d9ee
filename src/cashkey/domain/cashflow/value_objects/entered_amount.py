"""Parsing of amounts typed by the user."""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_entered_amount(raw: str | int) -> int | None:
    """Parse a user-entered amount into a positive whole number.

    Everything except digits is discarded, so ``"12,000"`` and ``"12 000 Lek"``
    both give ``12000``. Returns None when no positive amount is left.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None

    digits = _NON_DIGITS.sub("", raw)
    if not digits:
        return None
    amount = int(digits)
    return amount if amount > 0 else None
