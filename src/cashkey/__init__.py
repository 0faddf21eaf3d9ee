"""Cashkey: cash flow Sankey diagrams persisted in the page address."""

__version__ = "1.0.0"
