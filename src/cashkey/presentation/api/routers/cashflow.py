"""Cash flow router.

The API keeps no state of its own: every request carries the encoded state
and every change answers with the new encoding.
"""

import logging

from fastapi import APIRouter

from cashkey.application.commands import (
    AddItemCommand,
    DeleteItemCommand,
    EditItemCommand,
)
from cashkey.application.dtos import LoadedState, StateSource
from cashkey.application.ports import StateCodecPort
from cashkey.application.queries import (
    CashflowSummaryQuery,
    LoadStateQuery,
    SankeyQuery,
)
from cashkey.domain.cashflow import CashflowState, sample_state
from cashkey.infrastructure.codec import url_with_fragment
from cashkey.presentation.api.dependencies import (
    AppSettings,
    Codec,
    CurrentState,
    StateParam,
    decode_required_state,
)
from cashkey.presentation.api.schemas import (
    AddItemRequest,
    CashflowItemResponse,
    EditItemRequest,
    SankeyLinkResponse,
    SankeyNodeResponse,
    SankeyResponse,
    StateResponse,
    SummaryResponse,
)
from cashkey_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _state_response(
    state: CashflowState,
    fragment: str,
    settings: Settings,
    source: StateSource = StateSource.FRAGMENT,
) -> StateResponse:
    return StateResponse(
        incomes=[CashflowItemResponse.from_item(item) for item in state.incomes],
        expenses=[CashflowItemResponse.from_item(item) for item in state.expenses],
        fragment=fragment,
        share_url=url_with_fragment(settings.public_base_url, fragment),
        source=source.value,
    )


def _load(
    codec: StateCodecPort,
    settings: Settings,
    state: str | None,
) -> LoadedState:
    query = LoadStateQuery(codec, use_sample=settings.sample_data_enabled)
    return query.execute(state)


@router.get(
    "/state/sample",
    summary="Get the demo cash flow",
    responses={200: {"description": "Sample state with fresh item ids"}},
)
async def get_sample_state(codec: Codec, settings: AppSettings) -> StateResponse:
    """Demo data shown to first-time visitors."""
    state = sample_state()
    return _state_response(
        state,
        codec.encode(state),
        settings,
        source=StateSource.SAMPLE,
    )


@router.get(
    "/state",
    summary="Decode an encoded state",
    responses={200: {"description": "Decoded state, or the fallback state"}},
)
async def get_state(
    codec: Codec,
    settings: AppSettings,
    state: StateParam = None,
) -> StateResponse:
    """
    Decode the state from an address fragment.

    Unreadable or missing fragments fall back to sample data (or an empty
    state when sample data is disabled); `source` tells which one was used.
    """
    loaded = _load(codec, settings, state)
    return _state_response(
        loaded.state,
        codec.encode(loaded.state),
        settings,
        source=loaded.source,
    )


@router.get(
    "/sankey",
    summary="Get Sankey diagram data for a cash flow",
    responses={200: {"description": "Sankey nodes and links"}},
)
async def get_sankey(
    codec: Codec,
    settings: AppSettings,
    state: StateParam = None,
) -> SankeyResponse:
    """
    Get Sankey diagram data for an encoded state.

    **Flow structure:**
    - Incomes (largest first) → Budget → Expenses (largest first)
    - A Deficit node feeds Budget when expenses exceed income
    - A Surplus node leaves Budget when income exceeds expenses
    - Collected VAT appears as the `🧾 VAT (auto)` expense

    Link `source`/`target` are indices into `nodes`.
    """
    loaded = _load(codec, settings, state)
    result = SankeyQuery().execute(loaded.state)

    return SankeyResponse(
        nodes=[
            SankeyNodeResponse(
                name=node.name,
                display_name=node.display_name,
                value=node.value,
                percentage=node.percentage,
                item_id=node.item_id,
                category=node.category.value,
                color=node.color,
            )
            for node in result.nodes
        ],
        links=[
            SankeyLinkResponse(
                source=link.source,
                target=link.target,
                value=link.value,
            )
            for link in result.links
        ],
        total_income=result.total_income,
        total_expense=result.total_expense,
        balance=result.balance,
        total_budget=result.total_budget,
        source=loaded.source.value,
    )


@router.get(
    "/summary",
    summary="Get income, VAT and expense totals",
)
async def get_summary(
    codec: Codec,
    settings: AppSettings,
    state: StateParam = None,
) -> SummaryResponse:
    loaded = _load(codec, settings, state)
    summary = CashflowSummaryQuery().execute(loaded.state)

    return SummaryResponse(
        total_income=summary.total_income,
        vat_total=summary.vat_total,
        expense_base_total=summary.expense_base_total,
        total_expense=summary.total_expense,
        balance=summary.balance,
        is_surplus=summary.is_surplus,
        has_vat=summary.has_vat,
        show_vat_row=summary.show_vat_row,
        source=loaded.source.value,
    )


@router.post(
    "/items",
    summary="Add an item",
    status_code=201,
    responses={
        400: {"description": "Invalid name, amount, VAT flag or state"},
    },
)
async def add_item(
    request: AddItemRequest,
    codec: Codec,
    settings: AppSettings,
) -> StateResponse:
    """
    Add an income or expense item.

    Monthly amounts are stored as annual figures. Income entered with
    `vat_included` is split into net amount and VAT.
    """
    current = decode_required_state(codec, request.state)
    command = AddItemCommand(codec, vat_rate=settings.vat_rate)
    update = command.execute(
        current,
        kind=request.kind,
        name=request.name,
        amount=request.amount,
        period=request.period,
        vat_included=request.vat_included,
    )
    return _state_response(update.state, update.fragment, settings)


@router.patch(
    "/items/{item_id}",
    summary="Edit an item",
    responses={
        400: {"description": "Invalid name, amount, VAT flag or state"},
        404: {"description": "Item not found"},
    },
)
async def edit_item(
    item_id: str,
    request: EditItemRequest,
    codec: Codec,
    settings: AppSettings,
) -> StateResponse:
    current = decode_required_state(codec, request.state)
    command = EditItemCommand(codec, vat_rate=settings.vat_rate)
    update = command.execute(
        current,
        item_id=item_id,
        name=request.name,
        amount=request.amount,
        vat_included=request.vat_included,
    )
    return _state_response(update.state, update.fragment, settings)


@router.delete(
    "/items/{item_id}",
    summary="Delete an item",
    responses={
        400: {"description": "Unreadable state"},
        404: {"description": "Item not found"},
    },
)
async def delete_item(
    item_id: str,
    current: CurrentState,
    codec: Codec,
    settings: AppSettings,
) -> StateResponse:
    update = DeleteItemCommand(codec).execute(current, item_id)
    return _state_response(update.state, update.fragment, settings)
