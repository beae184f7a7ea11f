"""Utility functions for payerindex."""

from payerindex.utils.address import normalize_address, normalize_transaction_hash
from payerindex.utils.amount_parser import parse_amount
from payerindex.utils.timestamp_parser import parse_timestamp

__all__ = [
    "normalize_address",
    "normalize_transaction_hash",
    "parse_amount",
    "parse_timestamp",
]
