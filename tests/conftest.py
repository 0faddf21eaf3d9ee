"""Root pytest configuration.

Test Structure:
    tests/
    ├── cashkey/
    │   ├── unit/          # Fast, isolated tests of domain, application,
    │   │                  # codec and CLI
    │   └── integration/   # HTTP API tests through FastAPI's TestClient
    └── cashkey_config/    # Settings
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from cashkey.domain.cashflow import CashflowItem, CashflowState
from cashkey_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def vat_income() -> CashflowItem:
    """Income entered as 1200 gross at 20% VAT."""
    return CashflowItem(
        id="inc-vat",
        name="🧾 Consulting",
        amount=1000,
        vat_included=True,
        vat_amount=200,
        gross_amount=1200,
    )


@pytest.fixture
def mixed_state(vat_income: CashflowItem) -> CashflowState:
    """Small state with plain and VAT income plus two expenses."""
    return CashflowState(
        incomes=(
            CashflowItem(id="inc-1", name="💼 Salary", amount=3000),
            vat_income,
        ),
        expenses=(
            CashflowItem(id="exp-1", name="🏠 Rent", amount=1500),
            CashflowItem(id="exp-2", name="Café & Snacks €", amount=250),
        ),
    )
