"""Domain layer: cash flow items, state and business rules."""
