"""URL-safe encoding of the complete cash flow state.

The encoded string is the only place the state is persisted, so it is kept
compact and decoding never raises.

Current format (version 2)::

    2.<base64url(zlib(json)) without padding>

where the JSON is ``{"i": [...incomes], "e": [...expenses]}`` and every
item is a positional array, ``[id, name, amount]`` or, for income entered
with VAT, ``[id, name, amount, vat_amount, gross_amount]``.

Legacy format (no version prefix): base64 of the plain or percent-encoded
JSON ``{"incomes": [...], "expenses": [...]}`` with one camelCase object per
item. VAT fields may be missing there; such items load without VAT.
"""

from __future__ import annotations

import base64
import json
import logging
import re
import zlib
from typing import Any
from urllib.parse import parse_qs, unquote

from pydantic import ValidationError as PydanticValidationError

from cashkey.domain.cashflow import CashflowItem, CashflowState, ItemKind

logger = logging.getLogger(__name__)

FORMAT_VERSION = "2"
VERSION_SEPARATOR = "."
STATE_QUERY_KEY = "s"

# Upper bound for the decompressed payload, far above any hand-made budget
MAX_PAYLOAD_BYTES = 1_000_000

_VERSIONED = re.compile(r"^(\d+)\.(.*)$", re.DOTALL)

_PLAIN_ITEM_LEN = 3
_VAT_ITEM_LEN = 5


class _UnreadableFragment(ValueError):
    pass


# =============================================================================
# Encoding
# =============================================================================


def _pack(item: CashflowItem) -> list[Any]:
    if item.vat_included:
        return [item.id, item.name, item.amount, item.vat_amount, item.gross_amount]
    return [item.id, item.name, item.amount]


def encode(state: CashflowState) -> str:
    """Encode the state into a URL-safe fragment.

    Equal states always produce the same string.
    """
    payload = {
        "i": [_pack(item) for item in state.incomes],
        "e": [_pack(item) for item in state.expenses],
    }
    raw = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    compressed = zlib.compress(raw.encode("utf-8"), 9)
    body = base64.urlsafe_b64encode(compressed).rstrip(b"=").decode("ascii")
    return f"{FORMAT_VERSION}{VERSION_SEPARATOR}{body}"


# =============================================================================
# Decoding
# =============================================================================


def _b64decode(text: str) -> bytes:
    """Decode base64 in either alphabet, with or without padding."""
    normalized = text.strip().replace(" ", "+").replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)


def _inflate(data: bytes) -> bytes:
    inflater = zlib.decompressobj()
    raw = inflater.decompress(data, MAX_PAYLOAD_BYTES)
    if inflater.unconsumed_tail:
        msg = "decompressed state exceeds size limit"
        raise _UnreadableFragment(msg)
    if not inflater.eof:
        msg = "compressed state is truncated"
        raise _UnreadableFragment(msg)
    return raw


def _strip_address_syntax(fragment: str) -> str:
    """Reduce ``#...``, ``?s=...`` or ``x=y&s=...`` to the bare state string.

    Plain legacy JSON is returned untouched, so ``&`` and ``%`` inside item
    names survive. Only percent-encoded JSON is unquoted.
    """
    text = fragment.strip()
    if text[:1] in ("#", "?"):
        text = text[1:]

    if text.startswith("{"):
        return text

    if text.startswith(f"{STATE_QUERY_KEY}=") or "&" in text:
        values = parse_qs(text, keep_blank_values=True).get(STATE_QUERY_KEY)
        return values[0].strip() if values else ""

    if text[:3].upper() == "%7B":
        return unquote(text)
    return text


def _unpack(entry: Any) -> Any:
    """Turn a positional item array into the item's field mapping."""
    if not isinstance(entry, list):
        return entry
    if len(entry) == _PLAIN_ITEM_LEN:
        item_id, name, amount = entry
        return {"id": item_id, "name": name, "amount": amount}
    if len(entry) == _VAT_ITEM_LEN:
        item_id, name, amount, vat_amount, gross_amount = entry
        return {
            "id": item_id,
            "name": name,
            "amount": amount,
            "vatIncluded": True,
            "vatAmount": vat_amount,
            "grossAmount": gross_amount,
        }
    return entry


def _upgrade_legacy(entry: Any) -> Any:
    """Bring an item object written by an older version up to date."""
    if not isinstance(entry, dict):
        return entry

    entry = dict(entry)
    if not entry.get("vatIncluded"):
        for key in ("vatIncluded", "vatAmount", "grossAmount"):
            entry.pop(key, None)
        return entry

    amount = entry.get("amount")
    vat_amount = entry.get("vatAmount")
    if (
        entry.get("grossAmount") is None
        and type(amount) is int
        and type(vat_amount) is int
    ):
        entry["grossAmount"] = amount + vat_amount
    return entry


def _entries(payload: dict[str, Any], key: str) -> list[Any]:
    entries = payload.get(key, [])
    if not isinstance(entries, list):
        msg = f"'{key}' is not a list"
        raise _UnreadableFragment(msg)
    return entries


def _read_current(body: str) -> tuple[list[Any], list[Any]]:
    payload = json.loads(_inflate(_b64decode(body)).decode("utf-8"))
    if not isinstance(payload, dict):
        msg = "state payload is not an object"
        raise _UnreadableFragment(msg)
    return (
        [_unpack(entry) for entry in _entries(payload, "i")],
        [_unpack(entry) for entry in _entries(payload, "e")],
    )


def _read_legacy(text: str) -> tuple[list[Any], list[Any]]:
    if text.lstrip().startswith("{"):
        json_text = text
    else:
        json_text = _b64decode(text).decode("utf-8")
        if not json_text.lstrip().startswith("{"):
            json_text = unquote(json_text)

    payload = json.loads(json_text)
    if not isinstance(payload, dict):
        msg = "state payload is not an object"
        raise _UnreadableFragment(msg)
    return (
        [_upgrade_legacy(entry) for entry in _entries(payload, "incomes")],
        [_upgrade_legacy(entry) for entry in _entries(payload, "expenses")],
    )


def _read_payload(text: str) -> tuple[list[Any], list[Any]]:
    match = _VERSIONED.match(text)
    if match is None:
        return _read_legacy(text)

    version, body = match.groups()
    if version != FORMAT_VERSION:
        msg = f"unsupported state format version {version}"
        raise _UnreadableFragment(msg)
    return _read_current(body)


def _valid_items(
    entries: list[Any],
    kind: ItemKind,
    seen_ids: set[str],
) -> list[CashflowItem]:
    """Validate item entries one by one, dropping the ones that fail."""
    items: list[CashflowItem] = []
    for position, entry in enumerate(entries):
        try:
            item = CashflowItem.model_validate(entry)
        except PydanticValidationError as e:
            logger.debug(
                "Dropping invalid %s item at position %d (%d errors)",
                kind.value,
                position,
                e.error_count(),
            )
            continue

        if item.id in seen_ids:
            logger.debug("Dropping %s item with duplicate id %s", kind.value, item.id)
            continue
        if kind is ItemKind.EXPENSE and item.vat_included:
            logger.debug("Dropping expense %s carrying VAT fields", item.id)
            continue

        seen_ids.add(item.id)
        items.append(item)
    return items


def decode(fragment: str | None) -> CashflowState | None:
    """Decode a fragment produced by :func:`encode` or an older version.

    Returns None for an absent or unreadable fragment; the caller falls back
    to default data. Individual items that fail validation are dropped and
    the rest of the state is kept.
    """
    if not isinstance(fragment, str):
        return None
    text = _strip_address_syntax(fragment)
    if not text:
        return None

    try:
        income_entries, expense_entries = _read_payload(text)
        seen_ids: set[str] = set()
        incomes = _valid_items(income_entries, ItemKind.INCOME, seen_ids)
        expenses = _valid_items(expense_entries, ItemKind.EXPENSE, seen_ids)
        return CashflowState(incomes=tuple(incomes), expenses=tuple(expenses))
    except (ValueError, TypeError, zlib.error, RecursionError) as e:
        logger.debug("Discarding unreadable state fragment: %s", e)
        return None


class UrlStateCodec:
    """StateCodecPort implementation backed by :func:`encode`/:func:`decode`."""

    def encode(self, state: CashflowState) -> str:
        return encode(state)

    def decode(self, fragment: str | None) -> CashflowState | None:
        return decode(fragment)
