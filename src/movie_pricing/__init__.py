"""Discount-policy pricing engine for movie screenings."""

__version__ = "0.1.0"
