"""Application layer: queries and commands over the cash flow state."""
