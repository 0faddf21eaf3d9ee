"""Unit tests for the URL state codec."""

import base64
import json
import re
import zlib
from typing import Any
from urllib.parse import quote

import pytest

from cashkey.domain.cashflow import CashflowItem, CashflowState, sample_state
from cashkey.infrastructure.codec import UrlStateCodec, decode, encode
from cashkey.infrastructure.codec.state_codec import MAX_PAYLOAD_BYTES

URL_SAFE = re.compile(r"^2\.[A-Za-z0-9_-]*$")


def _v2(payload: Any) -> str:
    raw = json.dumps(payload).encode("utf-8")
    body = base64.urlsafe_b64encode(zlib.compress(raw)).rstrip(b"=").decode("ascii")
    return f"2.{body}"


def _legacy(payload: Any) -> str:
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


class TestEncode:
    """Encoding output."""

    def test_uses_only_url_safe_characters(self, mixed_state):
        assert URL_SAFE.match(encode(mixed_state))

    def test_is_deterministic(self, mixed_state):
        copy = CashflowState.model_validate(mixed_state.model_dump())

        assert encode(mixed_state) == encode(mixed_state)
        assert encode(copy) == encode(mixed_state)

    def test_sample_state_stays_compact(self):
        assert len(encode(sample_state())) < 2000


class TestRoundTrip:
    """decode(encode(s)) == s."""

    def test_mixed_state(self, mixed_state):
        assert decode(encode(mixed_state)) == mixed_state

    def test_empty_state(self):
        decoded = decode(encode(CashflowState.empty()))

        assert decoded is not None
        assert decoded.is_empty()

    def test_order_and_unicode_are_kept(self):
        state = CashflowState(
            incomes=(
                CashflowItem(id="b", name="Zürich & Co. \"quoted\"", amount=1),
                CashflowItem(id="a", name="🏛️ Local Taxes\n2nd line", amount=0),
            ),
            expenses=(CashflowItem(id="c", name="日本語", amount=10**12),),
        )

        assert decode(encode(state)) == state

    def test_sample_state(self):
        state = sample_state()

        assert decode(encode(state)) == state

    def test_codec_class(self, mixed_state):
        codec = UrlStateCodec()

        assert codec.decode(codec.encode(mixed_state)) == mixed_state


class TestDecodeAddressForms:
    """The fragment may arrive with address syntax around it."""

    def test_with_hash(self, mixed_state):
        assert decode("#" + encode(mixed_state)) == mixed_state

    def test_as_query(self, mixed_state):
        assert decode("?s=" + encode(mixed_state)) == mixed_state

    def test_as_query_with_other_params(self, mixed_state):
        assert decode(f"utm=x&s={encode(mixed_state)}") == mixed_state

    def test_with_surrounding_whitespace(self, mixed_state):
        assert decode(f"  {encode(mixed_state)}\n") == mixed_state

    def test_padded_body(self, mixed_state):
        fragment = encode(mixed_state)
        padded = fragment + "=" * (-len(fragment.split(".", 1)[1]) % 4)

        assert decode(padded) == mixed_state


class TestDecodeFailures:
    """Unreadable input yields None, never an exception."""

    @pytest.mark.parametrize(
        "fragment",
        [
            None,
            "",
            "   ",
            "#",
            "not base64 at all!",
            "2.",
            "2.@@@@",
            "2.AAAA",
            "3.abc",
            "{not json",
            "bnVsbA",  # base64 of "null"
            "?other=1",
        ],
    )
    def test_returns_none(self, fragment):
        assert decode(fragment) is None

    @pytest.mark.parametrize("fragment", [123, b"2.abc", ["2.abc"]])
    def test_non_string_input(self, fragment):
        assert decode(fragment) is None

    def test_truncated_fragment(self, mixed_state):
        fragment = encode(mixed_state)

        assert decode(fragment[: len(fragment) // 2]) is None

    def test_payload_is_not_an_object(self):
        assert decode(_v2([1, 2, 3])) is None

    def test_item_lists_must_be_lists(self):
        assert decode(_v2({"i": "oops", "e": []})) is None

    def test_oversized_payload(self):
        bomb = {"i": [], "e": [], "pad": "x" * (MAX_PAYLOAD_BYTES + 10)}

        assert decode(_v2(bomb)) is None


class TestDecodeDropsInvalidItems:
    """Bad items are dropped one by one, the rest survives."""

    def test_invalid_items_are_dropped(self):
        fragment = _v2(
            {
                "i": [
                    ["a", "Good", 100],
                    ["b", "", 5],  # blank name
                    ["c", "Negative", -5],
                    ["d", "Float", 1.5],
                    ["e", "Bad VAT", 1000, 200, 1300],
                    ["f", "Too", "many", "fields", 1, 2],
                    "not an item",
                    ["g", "Also good", 7],
                ],
                "e": [["h", "Rent", 50]],
            },
        )

        state = decode(fragment)

        assert state is not None
        assert [i.id for i in state.incomes] == ["a", "g"]
        assert [e.id for e in state.expenses] == ["h"]

    def test_duplicate_ids_keep_first(self):
        fragment = _v2(
            {
                "i": [["x", "First", 1], ["x", "Second", 2]],
                "e": [["x", "Third", 3], ["y", "Fourth", 4]],
            },
        )

        state = decode(fragment)

        assert [(i.id, i.name) for i in state.incomes] == [("x", "First")]
        assert [(e.id, e.name) for e in state.expenses] == [("y", "Fourth")]

    def test_expense_with_vat_is_dropped(self):
        fragment = _v2({"i": [], "e": [["v", "VAT expense", 1000, 200, 1200]]})

        state = decode(fragment)

        assert state is not None
        assert state.expenses == ()

    def test_missing_lists_mean_empty_sides(self):
        state = decode(_v2({"i": [["a", "A", 1]]}))

        assert [i.id for i in state.incomes] == ["a"]
        assert state.expenses == ()


class TestDecodeLegacyFormat:
    """Links created before the versioned format still open."""

    def test_base64_json(self):
        fragment = _legacy(
            {
                "incomes": [
                    {"id": "a", "name": "Salary", "amount": 600, "vatIncluded": False},
                    {
                        "id": "b",
                        "name": "Consulting",
                        "amount": 1000,
                        "vatIncluded": True,
                        "vatAmount": 200,
                        "grossAmount": 1200,
                    },
                ],
                "expenses": [{"id": "c", "name": "Rent", "amount": 800}],
            },
        )

        state = decode(fragment)

        assert [i.id for i in state.incomes] == ["a", "b"]
        assert state.incomes[1].vat_amount == 200
        assert state.expenses[0].amount == 800

    def test_missing_gross_is_derived(self):
        fragment = _legacy(
            {
                "incomes": [
                    {
                        "id": "b",
                        "name": "Consulting",
                        "amount": 1000,
                        "vatIncluded": True,
                        "vatAmount": 200,
                    },
                ],
                "expenses": [],
            },
        )

        assert decode(fragment).incomes[0].gross_amount == 1200

    def test_stale_vat_fields_are_ignored_without_flag(self):
        fragment = _legacy(
            {
                "incomes": [
                    {
                        "id": "a",
                        "name": "A",
                        "amount": 10,
                        "vatIncluded": False,
                        "vatAmount": 0,
                        "grossAmount": 10,
                    },
                ],
                "expenses": [],
            },
        )

        item = decode(fragment).incomes[0]
        assert item.vat_included is False
        assert item.vat_amount is None

    def test_plain_and_percent_encoded_json(self):
        payload = {"incomes": [{"id": "a", "name": "A €", "amount": 1}], "expenses": []}
        raw = json.dumps(payload, ensure_ascii=False)

        assert decode(raw).incomes[0].name == "A €"
        assert decode(quote(raw)).incomes[0].name == "A €"

    def test_plain_json_with_ampersand_in_name(self):
        raw = json.dumps(
            {
                "incomes": [{"id": "a", "name": "R&D grant", "amount": 100}],
                "expenses": [{"id": "b", "name": "Q&A?s=1", "amount": 5}],
            },
        )

        state = decode(raw)

        assert state is not None
        assert state.incomes[0].name == "R&D grant"
        assert state.expenses[0].name == "Q&A?s=1"
        assert decode("#" + raw) == state

    def test_literal_percent_sequences_are_kept(self):
        raw = json.dumps(
            {"incomes": [{"id": "a", "name": "Promo %41B", "amount": 100}], "expenses": []},
        )

        assert decode(raw).incomes[0].name == "Promo %41B"
        assert decode(quote(raw)).incomes[0].name == "Promo %41B"

    def test_base64_of_percent_encoded_json(self):
        payload = {"incomes": [], "expenses": [{"id": "e", "name": "Ü", "amount": 3}]}
        fragment = base64.b64encode(quote(json.dumps(payload)).encode("ascii")).decode()

        assert decode(fragment).expenses[0].name == "Ü"

    def test_reencoding_upgrades_to_current_format(self):
        fragment = _legacy(
            {"incomes": [{"id": "a", "name": "A", "amount": 1}], "expenses": []},
        )

        upgraded = encode(decode(fragment))

        assert upgraded.startswith("2.")
        assert decode(upgraded) == decode(fragment)
