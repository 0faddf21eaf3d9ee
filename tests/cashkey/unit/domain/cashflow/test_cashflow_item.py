"""Unit tests for the CashflowItem entity."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from cashkey.domain.cashflow import CashflowItem


class TestCashflowItemValidation:
    """Field and cross-field validation."""

    def test_plain_item(self):
        item = CashflowItem(id="a", name="💼 Salary", amount=600)

        assert item.amount == 600
        assert item.vat_included is False
        assert item.vat_amount is None
        assert item.gross_amount is None

    def test_zero_amount_is_allowed(self):
        assert CashflowItem(id="a", name="Nothing", amount=0).amount == 0

    @pytest.mark.parametrize("amount", [-1, 1.5, "100", True])
    def test_rejects_non_integer_or_negative_amount(self, amount):
        with pytest.raises(PydanticValidationError):
            CashflowItem(id="a", name="Bad", amount=amount)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_blank_name(self, name):
        with pytest.raises(PydanticValidationError):
            CashflowItem(id="a", name=name, amount=1)

    def test_rejects_empty_id(self):
        with pytest.raises(PydanticValidationError):
            CashflowItem(id="", name="A", amount=1)

    def test_vat_item_requires_consistent_gross(self):
        with pytest.raises(PydanticValidationError):
            CashflowItem(
                id="a",
                name="A",
                amount=1000,
                vat_included=True,
                vat_amount=200,
                gross_amount=1300,
            )

    def test_vat_item_requires_both_vat_fields(self):
        with pytest.raises(PydanticValidationError):
            CashflowItem(id="a", name="A", amount=1000, vat_included=True, vat_amount=200)

    def test_vat_fields_without_flag_are_rejected(self):
        with pytest.raises(PydanticValidationError):
            CashflowItem(id="a", name="A", amount=1000, vat_amount=200, gross_amount=1200)

    def test_accepts_camel_case_keys(self):
        """State written by the browser uses camelCase keys."""
        item = CashflowItem.model_validate(
            {
                "id": "a",
                "name": "A",
                "amount": 1000,
                "vatIncluded": True,
                "vatAmount": 200,
                "grossAmount": 1200,
            },
        )

        assert item.vat_included is True
        assert item.gross_amount == 1200

    def test_is_immutable(self):
        item = CashflowItem(id="a", name="A", amount=1)

        with pytest.raises(PydanticValidationError):
            item.amount = 2


class TestCashflowItemFactories:
    """create, from_gross and with_entry."""

    def test_create_generates_unique_ids(self):
        first = CashflowItem.create("A", 1)
        second = CashflowItem.create("A", 1)

        assert first.id
        assert first.id != second.id

    def test_from_gross_splits_vat(self):
        item = CashflowItem.from_gross("🧾 Consulting", 1200)

        assert item.amount == 1000
        assert item.vat_amount == 200
        assert item.gross_amount == 1200
        assert item.vat_included is True

    def test_from_gross_with_custom_rate(self):
        item = CashflowItem.from_gross("A", 1100, vat_rate=Decimal("0.1"))

        assert item.amount == 1000
        assert item.vat_amount == 100

    def test_entered_amount_is_gross_for_vat_items(self, vat_income):
        assert vat_income.entered_amount == 1200
        assert CashflowItem(id="a", name="A", amount=5).entered_amount == 5

    def test_with_entry_keeps_id(self):
        item = CashflowItem(id="keep-me", name="Old", amount=10)

        edited = item.with_entry("New", 20)

        assert edited.id == "keep-me"
        assert edited.name == "New"
        assert edited.amount == 20

    def test_with_entry_recomputes_vat(self, vat_income):
        edited = vat_income.with_entry("🧾 Consulting", 2400, vat_included=True)

        assert edited.id == vat_income.id
        assert edited.amount == 2000
        assert edited.vat_amount == 400
        assert edited.gross_amount == 2400

    def test_with_entry_without_vat_clears_vat_fields(self, vat_income):
        edited = vat_income.with_entry("Consulting", 1200)

        assert edited.amount == 1200
        assert edited.vat_included is False
        assert edited.vat_amount is None
        assert edited.gross_amount is None
