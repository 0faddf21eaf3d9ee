"""FastAPI dependency injection for the Cashkey API.

Provides dependencies for:
- Settings (per application instance)
- The state codec
- The cash flow state carried by a request
"""

import logging
from typing import Annotated

from fastapi import Depends, Query, Request

from cashkey.application.ports import StateCodecPort
from cashkey.domain.cashflow import CashflowState
from cashkey.domain.shared.exceptions import ErrorCode, ValidationError
from cashkey.infrastructure.codec import UrlStateCodec
from cashkey_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_codec() -> StateCodecPort:
    return UrlStateCodec()


Codec = Annotated[StateCodecPort, Depends(get_codec)]

StateParam = Annotated[
    str | None,
    Query(description="Encoded state, as found in the page address fragment"),
]


def decode_required_state(codec: StateCodecPort, fragment: str | None) -> CashflowState:
    """Decode state that a change is going to be applied to.

    A missing fragment means an empty cash flow; an unreadable one is
    rejected instead of silently replacing the user's data.
    """
    if fragment is None or not fragment.strip():
        return CashflowState.empty()

    state = codec.decode(fragment)
    if state is None:
        msg = "The encoded state could not be read"
        raise ValidationError(msg, code=ErrorCode.INVALID_STATE)
    return state


def get_current_state(codec: Codec, state: StateParam = None) -> CashflowState:
    return decode_required_state(codec, state)


CurrentState = Annotated[CashflowState, Depends(get_current_state)]
