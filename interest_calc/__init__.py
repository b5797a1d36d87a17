"""Compound-interest projections, inverse solvers and weekly tax-drag modelling."""

__version__ = "0.1.0"
