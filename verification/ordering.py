"""
Order Verifier

Decides whether values captured from the page are in the expected order.

The captured list is never reordered: a sorted copy is built for
comparison and both are kept on the Verdict so a failure can point at
the exact position that went wrong.
"""

import logging
import re
from decimal import Decimal
from typing import Any, List, Sequence, Tuple

from .models import SortKey, SortSpec, Verdict, VerdictStatus

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "$"

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


class ParseError(ValueError):
    """Raised when captured text cannot be read under the requested sort key."""

    def __init__(self, value: str, key: SortKey, index: int = None):
        self.value = value
        self.key = key
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Cannot parse {value!r}{where} as {key.value}")


def parse_price(text: str) -> Decimal:
    """
    Parse a rendered price such as '$29.99'.

    Args:
        text: Element text content

    Returns:
        The price as a Decimal

    Raises:
        ParseError if the text is not a currency-prefixed decimal
    """
    value = text.strip()
    if value.startswith(CURRENCY_SYMBOL):
        value = value[len(CURRENCY_SYMBOL):]

    if not _DECIMAL_PATTERN.fullmatch(value):
        raise ParseError(text, SortKey.PRICE)
    return Decimal(value)


def parse_value(text: str, key: SortKey) -> Any:
    """Convert captured text into a comparable value for the given key."""
    if key == SortKey.PRICE:
        return parse_price(text)
    return text


def _parse_all(observed: Sequence[str], key: SortKey) -> List[Tuple[Any, str]]:
    parsed = []
    for index, text in enumerate(observed):
        try:
            parsed.append((parse_value(text, key), text))
        except ParseError:
            raise ParseError(text, key, index) from None
    return parsed


def verify_order(observed: Sequence[str], spec: SortSpec) -> Verdict:
    """
    Check that observed values are ordered according to spec.

    Empty and single-element sequences are always sorted. Ties keep their
    original relative order (stable sort in both directions).

    Args:
        observed: Text values in on-screen order
        spec: Expected key and direction

    Returns:
        Verdict with SORTED status, or NOT_SORTED with the first mismatch

    Raises:
        ParseError if a value cannot be read under spec.key
    """
    captured = tuple(observed)
    parsed = _parse_all(captured, spec.key)

    # sorted() with reverse=True keeps equal keys in original order
    ordered = sorted(parsed, key=lambda pair: pair[0], reverse=spec.descending)
    expected = tuple(text for _, text in ordered)

    for index, (actual, wanted) in enumerate(zip(captured, expected)):
        if actual != wanted:
            logger.debug(f"Order mismatch by {spec} at index {index}: {actual!r} != {wanted!r}")
            return Verdict(
                status=VerdictStatus.NOT_SORTED,
                spec=spec,
                observed=captured,
                expected=expected,
                mismatch_index=index,
                observed_value=actual,
                expected_value=wanted,
            )

    logger.debug(f"{len(captured)} value(s) sorted by {spec}")
    return Verdict(
        status=VerdictStatus.SORTED,
        spec=spec,
        observed=captured,
        expected=expected,
    )


def assert_sorted(observed: Sequence[str], spec: SortSpec) -> Verdict:
    """
    Assertion-layer wrapper around verify_order.

    Returns the verdict when sorted and raises AssertionError with a
    diagnostic message otherwise. ParseError is not converted.
    """
    verdict = verify_order(observed, spec)
    if not verdict.is_sorted:
        raise AssertionError(verdict.describe())
    return verdict
