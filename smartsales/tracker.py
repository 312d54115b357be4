"""Collection of sales with file storage, summaries and search."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .sale import Sale

SALES_FILENAME = "SALE_data.txt"

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_MONTH_CODES = tuple(f"{number:02d}" for number in range(1, 13))
_NAME_BY_CODE = dict(zip(_MONTH_CODES, _MONTH_NAMES))


def month_name(month: str) -> str:
    """Return the English name for a two-digit month code, or "Unknown"."""
    return _NAME_BY_CODE.get(month, "Unknown")


def format_amount(amount: float) -> str:
    """Format a dollar amount with exactly two decimals."""
    return f"{amount:.2f}"


def _best(totals: dict[str, float]) -> tuple[str, float]:
    """First key (in key order) with the largest strictly positive total."""
    best_key, best_amount = "", 0.0
    for key, amount in totals.items():
        if amount > best_amount:
            best_key, best_amount = key, amount
    return best_key, best_amount


@dataclass(frozen=True)
class MonthlySummary:
    """Sales of one month, grouped by date and by product."""

    month_year: str
    month_name: str
    year: str
    days: dict[str, list[Sale]]
    day_totals: dict[str, float]
    product_totals: dict[str, float]
    total: float
    best_day: str
    best_day_amount: float
    export_filename: str

    def report(self) -> str:
        """Return the summary as exported to a text file."""
        lines = [f"Monthly Summary: {self.month_name} {self.year}", "-------------------------", ""]
        for date, sales in self.days.items():
            lines.append(f"========== {date} ==========")
            lines.extend(
                f"- {sale.customer_name} ({sale.product}) - ${format_amount(sale.amount)}"
                for sale in sales
            )
            lines.append(f"    Total: ${format_amount(self.day_totals[date])}")
            lines.append("")
        lines.append("-----------------------------------------")
        lines.append("Product Totals:")
        lines.extend(
            f"  - {product}: ${format_amount(amount)}"
            for product, amount in self.product_totals.items()
        )
        lines.append("")
        lines.append("-----------------------------------------")
        lines.append(f"Total Sales: ${format_amount(self.total)}")
        lines.append(f"Best Day: {self.best_day} (${format_amount(self.best_day_amount)})")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class YearlySummary:
    """Sales of one year, totalled by month and by product."""

    year: str
    month_totals: dict[str, float]
    calendar_totals: list[tuple[str, float]]
    product_totals: dict[str, float]
    total: float
    best_month: str
    best_month_name: str
    best_month_amount: float
    export_filename: str

    def report(self) -> str:
        """Return the summary as exported to a text file."""
        lines = [f"Yearly Summary: {self.year}", "-------------------------", ""]
        lines.extend(f"{name}: ${format_amount(amount)}" for name, amount in self.calendar_totals)
        lines.append("")
        lines.append("-------------------------")
        lines.append("Total Sales by Product:")
        lines.extend(
            f"- {product}: ${format_amount(amount)}"
            for product, amount in self.product_totals.items()
        )
        lines.append("")
        lines.append("-------------------------")
        lines.append(f"Total Sales: ${format_amount(self.total)}")
        lines.append(
            f"Best Month: {self.best_month_name} (${format_amount(self.best_month_amount)})"
        )
        return "\n".join(lines) + "\n"


class SalesTracker:
    """Keeps an ordered list of sales."""

    def __init__(self, sales: Iterable[Sale] = ()) -> None:
        self._sales: list[Sale] = list(sales)

    def __iter__(self) -> Iterator[Sale]:
        return iter(self._sales)

    def __len__(self) -> int:
        return len(self._sales)

    def add_sale(self, sale: Sale) -> None:
        """Append a sale."""
        self._sales.append(sale)

    def load(self, filename: str | Path) -> bool:
        """Append the sales stored in a file.

        Blank lines and lines containing "===" are skipped. Returns False
        when the file does not exist, True otherwise.
        """
        try:
            with open(filename, encoding="utf-8") as infile:
                for raw_line in infile:
                    line = raw_line.rstrip("\n")
                    if not line or "===" in line:
                        continue
                    self._sales.append(Sale.from_file_string(line))
        except FileNotFoundError:
            return False
        return True

    def save(self, filename: str | Path) -> None:
        """Write every sale to a file, one line each, replacing its contents."""
        with open(filename, "w", encoding="utf-8") as outfile:
            outfile.writelines(f"{sale.to_file_string()}\n" for sale in self._sales)

    def monthly_summary(self, month_year: str) -> MonthlySummary | None:
        """Summarise sales of a month given as MM/YYYY; None when there are none."""
        month_code, year = month_year[:2], month_year[3:7]
        by_date: defaultdict[str, list[Sale]] = defaultdict(list)
        day_totals: defaultdict[str, float] = defaultdict(float)
        product_totals: defaultdict[str, float] = defaultdict(float)
        total = 0.0
        for sale in self._sales:
            if f"{sale.date[:2]}/{sale.date[6:10]}" != month_year:
                continue
            by_date[sale.date].append(sale)
            total += sale.amount
            day_totals[sale.date] += sale.amount
            product_totals[sale.product] += sale.amount
        if not by_date:
            return None
        sorted_day_totals = {date: day_totals[date] for date in sorted(day_totals)}
        best_day, best_amount = _best(sorted_day_totals)
        return MonthlySummary(
            month_year=month_year,
            month_name=month_name(month_code),
            year=year,
            days={date: by_date[date] for date in sorted(by_date)},
            day_totals=sorted_day_totals,
            product_totals={name: product_totals[name] for name in sorted(product_totals)},
            total=total,
            best_day=best_day,
            best_day_amount=best_amount,
            export_filename=f"summary{month_code}_{year}.txt",
        )

    def yearly_summary(self, year: str) -> YearlySummary | None:
        """Summarise sales of a four-digit year; None when there are none."""
        month_totals: defaultdict[str, float] = defaultdict(float)
        product_totals: defaultdict[str, float] = defaultdict(float)
        total = 0.0
        for sale in self._sales:
            if sale.date[6:10] != year:
                continue
            month_totals[sale.date[:2]] += sale.amount
            product_totals[sale.product] += sale.amount
            total += sale.amount
        if not month_totals:
            return None
        sorted_month_totals = {code: month_totals[code] for code in sorted(month_totals)}
        best_month, best_amount = _best(sorted_month_totals)
        return YearlySummary(
            year=year,
            month_totals=sorted_month_totals,
            calendar_totals=[
                (name, sorted_month_totals[code])
                for code, name in zip(_MONTH_CODES, _MONTH_NAMES)
                if code in sorted_month_totals
            ],
            product_totals={name: product_totals[name] for name in sorted(product_totals)},
            total=total,
            best_month=best_month,
            best_month_name=_NAME_BY_CODE.get(best_month, best_month),
            best_month_amount=best_amount,
            export_filename=f"summary_{year}.txt",
        )

    def search(self, term: str) -> list[Sale]:
        """Sales whose customer, product or date contains the term, ignoring case."""
        needle = term.lower()
        return [
            sale
            for sale in self._sales
            if needle in sale.customer_name.lower()
            or needle in sale.product.lower()
            or needle in sale.date.lower()
        ]

    def remove(self, sale: Sale) -> None:
        """Remove a sale; raises ValueError if it is not tracked."""
        try:
            self._sales.remove(sale)
        except ValueError:
            raise ValueError(f"sale not found: {sale!r}") from None