"""Validation of item fields entered by the user."""

from __future__ import annotations

from cashkey.domain.cashflow import ItemKind, parse_entered_amount
from cashkey.domain.shared.exceptions import ErrorCode, ValidationError


def require_name(name: str) -> str:
    if not name or not name.strip():
        msg = "Item name is required"
        raise ValidationError(msg, code=ErrorCode.INVALID_NAME)
    return name


def require_amount(raw: str | int) -> int:
    amount = parse_entered_amount(raw)
    if amount is None:
        msg = f"Amount must be a positive whole number, got {raw!r}"
        raise ValidationError(msg, code=ErrorCode.INVALID_AMOUNT)
    return amount


def require_vat_allowed(kind: ItemKind, vat_included: bool) -> None:
    if vat_included and kind is not ItemKind.INCOME:
        msg = "VAT can only be included on income items"
        raise ValidationError(msg, code=ErrorCode.VAT_NOT_ALLOWED)
