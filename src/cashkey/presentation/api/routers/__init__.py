from cashkey.presentation.api.routers.cashflow import router as cashflow_router

__all__ = ["cashflow_router"]
