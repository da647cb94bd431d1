"""
Account Ledger

A single-account ledger with an interactive console menu. All monetary
values use Decimal with half-up rounding to two decimal places.
"""

__version__ = "1.0.0"
