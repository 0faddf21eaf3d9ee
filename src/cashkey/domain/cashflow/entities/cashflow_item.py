"""Cash flow line item entity."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from cashkey.domain.cashflow.value_objects import VAT_RATE, split_gross

NonNegativeInt = Annotated[StrictInt, Field(ge=0)]


def new_item_id() -> str:
    """Generate a fresh opaque item id."""
    return str(uuid4())


class CashflowItem(BaseModel):
    """One income or expense line.

    ``amount`` is a whole number of currency units. For income captured as a
    VAT-inclusive figure it is the net part, and ``vat_amount`` and
    ``gross_amount`` carry the rest of the decomposition.

    Field aliases are camelCase so state written by the browser
    (``vatIncluded``, ``vatAmount``, ``grossAmount``) validates as-is.
    """

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    amount: NonNegativeInt
    vat_included: StrictBool = False
    vat_amount: NonNegativeInt | None = None
    gross_amount: NonNegativeInt | None = None

    model_config = ConfigDict(
        frozen=True,  # Immutable
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            msg = "Item name cannot be blank"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_vat_fields(self) -> CashflowItem:
        if self.vat_included:
            if self.vat_amount is None or self.gross_amount is None:
                msg = "VAT items need both vat_amount and gross_amount"
                raise ValueError(msg)
            if self.gross_amount != self.amount + self.vat_amount:
                msg = (
                    f"gross_amount {self.gross_amount} != "
                    f"amount {self.amount} + vat_amount {self.vat_amount}"
                )
                raise ValueError(msg)
        elif self.vat_amount is not None or self.gross_amount is not None:
            msg = "vat_amount and gross_amount require vat_included"
            raise ValueError(msg)
        return self

    @classmethod
    def create(cls, name: str, amount: int) -> CashflowItem:
        """Create a plain item with a new id."""
        return cls(id=new_item_id(), name=name, amount=amount)

    @classmethod
    def from_gross(
        cls,
        name: str,
        gross: int,
        vat_rate: Decimal = VAT_RATE,
        item_id: str | None = None,
    ) -> CashflowItem:
        """Create an income item from a VAT-inclusive figure."""
        split = split_gross(gross, vat_rate)
        return cls(
            id=item_id or new_item_id(),
            name=name,
            amount=split.net,
            vat_included=True,
            vat_amount=split.vat,
            gross_amount=split.gross,
        )

    @property
    def entered_amount(self) -> int:
        """The figure the user typed: gross for VAT items, amount otherwise."""
        if self.vat_included and self.gross_amount is not None:
            return self.gross_amount
        return self.amount

    def with_entry(
        self,
        name: str,
        entered_amount: int,
        vat_included: bool = False,
        vat_rate: Decimal = VAT_RATE,
    ) -> CashflowItem:
        """Return an edited copy keeping this item's id.

        VAT fields are derived again from ``entered_amount``; a non-VAT edit
        clears them.
        """
        if vat_included:
            return CashflowItem.from_gross(
                name,
                entered_amount,
                vat_rate=vat_rate,
                item_id=self.id,
            )
        return CashflowItem(id=self.id, name=name, amount=entered_amount)
