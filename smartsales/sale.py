"""A single recorded sale and its one-line file representation."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Leading numeric prefix, as accepted by a lenient string-to-double conversion:
# optional whitespace, a sign, then a decimal/exponent number, inf or nan.
_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_amount(text: str) -> float:
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid sale amount: {text!r}")
    return float(match.group(1))


def _format_general(amount: float) -> str:
    """Format a number the way a default-precision stream does (6 significant digits)."""
    return format(amount, "g")


@dataclass(frozen=True)
class Sale:
    """One sale: who bought what, when (MM/DD/YYYY), and for how many dollars."""

    customer_name: str
    product: str
    date: str
    amount: float

    def to_file_string(self) -> str:
        """Return the comma-separated line used to store this sale."""
        return f"{self.customer_name},{self.product},{self.date},{_format_general(self.amount)}"

    @classmethod
    def from_file_string(cls, line: str) -> Sale:
        """Parse a stored line; fields beyond the fourth are ignored.

        Raises ValueError when the amount field is missing or not numeric.
        """
        parts = line.split(",")
        if len(parts) < 4:
            raise ValueError(f"sale line has fewer than four fields: {line!r}")
        customer_name, product, date, amount_text = parts[:4]
        return cls(customer_name, product, date, _parse_amount(amount_text))