"""
Ordering Verification

Checks that lists captured from the page (prices, product names) are
sorted the way the store claims to sort them.
"""

from .models import SORT_OPTIONS, SortDirection, SortKey, SortSpec, Verdict, VerdictStatus
from .ordering import ParseError, assert_sorted, parse_price, parse_value, verify_order

__all__ = [
    "SORT_OPTIONS",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "Verdict",
    "VerdictStatus",
    "ParseError",
    "assert_sorted",
    "parse_price",
    "parse_value",
    "verify_order",
]
