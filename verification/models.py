"""
Ordering Models

Data structures describing an expected ordering and the verdict of
checking a captured list against it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SortKey(str, Enum):
    """What the captured values represent."""

    PRICE = "price"
    NAME = "name"


class SortDirection(str, Enum):
    """Expected direction of the ordering."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class VerdictStatus(str, Enum):
    """Outcome of a single ordering check."""

    SORTED = "sorted"
    NOT_SORTED = "not_sorted"


# Values of the store's product sort <select>
SORT_OPTIONS: Dict[str, Tuple[SortKey, SortDirection]] = {
    "az": (SortKey.NAME, SortDirection.ASCENDING),
    "za": (SortKey.NAME, SortDirection.DESCENDING),
    "lohi": (SortKey.PRICE, SortDirection.ASCENDING),
    "hilo": (SortKey.PRICE, SortDirection.DESCENDING),
}

_DIRECTION_ALIASES = {
    "asc": SortDirection.ASCENDING,
    "ascending": SortDirection.ASCENDING,
    "desc": SortDirection.DESCENDING,
    "descending": SortDirection.DESCENDING,
}


@dataclass(frozen=True)
class SortSpec:
    """
    Expected ordering of a captured list.

    Supplied by the caller, never derived from the data.
    """

    key: SortKey
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESCENDING

    @property
    def option(self) -> str:
        """Sort dropdown value that produces this ordering."""
        for value, (key, direction) in SORT_OPTIONS.items():
            if key == self.key and direction == self.direction:
                return value
        raise ValueError(f"No sort option for {self}")

    @classmethod
    def from_option(cls, value: str) -> "SortSpec":
        """Create from a sort dropdown value such as 'lohi'."""
        if value not in SORT_OPTIONS:
            raise ValueError(
                f"Unknown sort option: {value!r} (expected one of {', '.join(SORT_OPTIONS)})"
            )
        key, direction = SORT_OPTIONS[value]
        return cls(key=key, direction=direction)

    @classmethod
    def parse(cls, text: str) -> "SortSpec":
        """
        Create from a compact 'key[:direction]' string.

        Examples: 'price', 'price:desc', 'name:ascending'.
        """
        key_part, _, direction_part = text.strip().partition(":")
        try:
            key = SortKey(key_part.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown sort key: {key_part!r}")

        direction_part = direction_part.strip().lower()
        if not direction_part:
            return cls(key=key)
        if direction_part not in _DIRECTION_ALIASES:
            raise ValueError(f"Unknown sort direction: {direction_part!r}")
        return cls(key=key, direction=_DIRECTION_ALIASES[direction_part])

    def __str__(self) -> str:
        return f"{self.key.value}:{self.direction.value}"


@dataclass(frozen=True)
class Verdict:
    """Result of checking one captured list against a SortSpec."""

    status: VerdictStatus
    spec: SortSpec
    observed: Tuple[str, ...] = field(default_factory=tuple)
    expected: Tuple[str, ...] = field(default_factory=tuple)
    mismatch_index: Optional[int] = None
    observed_value: Optional[str] = None
    expected_value: Optional[str] = None

    @property
    def is_sorted(self) -> bool:
        return self.status == VerdictStatus.SORTED

    def describe(self) -> str:
        """One-line diagnostic suitable for an assertion message."""
        if self.is_sorted:
            return f"{len(self.observed)} value(s) sorted by {self.spec}"
        return (
            f"Not sorted by {self.spec}: at index {self.mismatch_index} "
            f"found {self.observed_value!r}, expected {self.expected_value!r} "
            f"(observed={list(self.observed)}, expected={list(self.expected)})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logs and reports."""
        return {
            "status": self.status.value,
            "key": self.spec.key.value,
            "direction": self.spec.direction.value,
            "observed": list(self.observed),
            "expected": list(self.expected),
            "mismatch_index": self.mismatch_index,
            "observed_value": self.observed_value,
            "expected_value": self.expected_value,
        }
