"""Restore the cash flow state from the page address on startup."""

from __future__ import annotations

import logging
from collections.abc import Callable

from cashkey.application.dtos.state_dto import LoadedState, StateSource
from cashkey.application.ports import StateCodecPort
from cashkey.domain.cashflow import CashflowState, sample_state

logger = logging.getLogger(__name__)


class LoadStateQuery:
    """Decode the address fragment, falling back to demo or empty data."""

    def __init__(
        self,
        codec: StateCodecPort,
        use_sample: bool = True,
        sample_factory: Callable[[], CashflowState] = sample_state,
    ):
        self._codec = codec
        self._use_sample = use_sample
        self._sample_factory = sample_factory

    def execute(self, fragment: str | None) -> LoadedState:
        state = self._codec.decode(fragment)
        if state is not None:
            return LoadedState(state=state, source=StateSource.FRAGMENT)

        if self._use_sample:
            logger.debug("No usable state in address, loading sample data")
            return LoadedState(state=self._sample_factory(), source=StateSource.SAMPLE)

        return LoadedState(state=CashflowState.empty(), source=StateSource.EMPTY)
