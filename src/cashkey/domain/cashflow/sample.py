"""Demo data shown on a first visit, when the address holds no state."""

from cashkey.domain.cashflow.entities import CashflowItem, CashflowState

SAMPLE_INCOMES: tuple[tuple[str, int], ...] = (
    ("💼 Client", 54132),
    ("📦 Other Client", 50000),
    ("📋 Small Client", 10000),
    ("🧾 Small Client", 5000),
    ("🔁 Other Client", 100),
)

SAMPLE_EXPENSES: tuple[tuple[str, int], ...] = (
    ("🏠 Rent/Mortgage", 16608),
    ("📱 Phone Bill", 7610),
    ("🚌 Transportation", 5676),
    ("🏛️ Local Taxes", 5000),
    ("💡 Utilities", 4475),
    ("🛡️ Social Security", 3000),
    ("🧰 Business Expenses", 1500),
    ("🎁 Gifts", 1000),
    ("🔄 Other", 1000),
)


def sample_state() -> CashflowState:
    """Build the demo state. Every call generates fresh item ids."""
    return CashflowState(
        incomes=tuple(CashflowItem.create(n, a) for n, a in SAMPLE_INCOMES),
        expenses=tuple(CashflowItem.create(n, a) for n, a in SAMPLE_EXPENSES),
    )
