"""Interactive console front end for the sales tracker."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from .sale import Sale
from .tracker import (
    SALES_FILENAME,
    MonthlySummary,
    SalesTracker,
    YearlySummary,
    format_amount,
    month_name,
)

MANAGE_FILENAME = "sales_2025.txt"

_RULE = "========================================="
_DASHES = "-----------------------------------------"
_RED = "\033[31m"
_RED_BOLD = "\033[31;1m"
_CYAN = "\033[36m"
_RESET = "\033[0m"

_INSTRUCTIONS = (
    "\n        Choose between numbers 1 through 5 and fill in\n"
    "    data to be saved as shown in examples along side the prompts\n"
    "     other wise, choose option 4 and delete the wrong data. "
)


class _Input:
    """Reads whole lines or single whitespace-separated words from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def line(self) -> str:
        text = self._stream.readline()
        if not text:
            raise EOFError
        return text.rstrip("\r\n")

    def word(self) -> str:
        while True:
            parts = self.line().split()
            if parts:
                return parts[0]


class Console:
    """Menu-driven session over a SalesTracker."""

    def __init__(
        self,
        tracker: SalesTracker | None = None,
        filename: str | Path = SALES_FILENAME,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        export_dir: str | Path = ".",
        manage_filename: str | Path = MANAGE_FILENAME,
    ) -> None:
        self.tracker = tracker if tracker is not None else SalesTracker()
        self.filename = Path(filename)
        self.export_dir = Path(export_dir)
        self.manage_filename = Path(manage_filename)
        self._input = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr if stderr is not None else sys.stderr

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _spacing(self) -> None:
        self._write("\n" + "=" * 48 + "\n\n\n")

    def _require_length(self, needed: int, value: str) -> str:
        """Ask again until the value has exactly the needed length."""
        while len(value) != needed:
            self._err.write(
                f"Sorry, input is invalid, please input number with {needed} "
                "characters and numbers\n"
            )
            self._err.flush()
            self._write("Remember to add your zeros and backslashes to your dates! \n")
            self._write("Re-enter: ")
            value = self._input.word()
            self._spacing()
        return value

    def _print_instructions(self) -> None:
        self._write(f"{'=======INSTRUCTIONS=======':>45}\n\n")
        self._write("=" * 69 + " \n")
        self._write(_INSTRUCTIONS + "\n\n")
        self._write("=" * 69 + " \n")

    def _print_menu(self) -> None:
        self._write("\n")
        self._write(f"{' SmartSales Tracker Menu =============':=>49}\n")
        self._write("     * 1. Add Sale\n")
        self._write("     * 2. Monthly Summary\n")
        self._write("     * 3. Yearly Summary\n")
        self._write("     * 4. Manage Sales\n")
        self._write("     * 5. Exit\n")
        self._spacing()
        self._write("Enter your choice: ")

    def run(self) -> None:
        """Load stored sales and serve the menu until exit or end of input."""
        self._print_instructions()
        if not self.tracker.load(self.filename):
            self._write("No existing sales file found.\n")
        actions = {
            1: self.add_sale,
            2: self.show_monthly_summary,
            3: self.show_yearly_summary,
            4: self.manage_sales,
        }
        try:
            while True:
                self._print_menu()
                try:
                    choice = int(self._input.word())
                except ValueError:
                    choice = 0
                self._spacing()
                if choice == 5:
                    self._write("Thank you for using SmartSales Tracker!\n")
                    return
                action = actions.get(choice)
                if action is None:
                    self._write("Invalid choice. Please try again.\n")
                else:
                    action()
        except EOFError:
            return

    def add_sale(self) -> None:
        """Prompt for a sale, record it and save the data file."""
        self._write(" Enter customer by full name. \n")
        self._write(f" EXAMPLE:{_RED}Jhon Smith{_RESET}\n")
        self._write("Enter customer name: ")
        name = self._input.line()
        self._spacing()

        self._write("Insert name of product. \n")
        self._write(f"EXAMPLE:{_RED}OIL{_RESET}\n")
        self._write("Enter product name: ")
        product = self._input.line()
        self._spacing()

        self._write("Enter date in of purchase in (MM/DD/YYYY) format \n")
        self._write(
            f"EXAMPLE:{_RED}04/12/2024{_RESET} for {_CYAN}April 12th, 2024{_RESET}\n\n"
        )
        self._write(f"for simplicity sake,{_RED_BOLD} add back slashes /{_RESET} \n\n")
        self._write("Enter calender date of purchase: ")
        date = self._input.line()
        self._spacing()
        date = self._require_length(10, date)

        self._write(
            " Enter dollar amount equal to price paid, inluding cents if neccesary\n "
        )
        self._write(f" EXAMPLES :{_RED}' 12.24 ' or ' 34 ' {_RESET}\n")
        while True:
            self._write(" Enter dollar ammount: ")
            try:
                amount = float(self._input.word())
                break
            except ValueError:
                continue

        self.tracker.add_sale(Sale(name, product, date, amount))
        self.tracker.save(self.filename)

    def _offer_export(self, kind: str, summary: MonthlySummary | YearlySummary) -> None:
        self._write(f"\nWould you like to export this {kind} summary to a file? (Y/N): ")
        answer = self._input.word()
        if answer[0] not in "Yy":
            return
        target = self.export_dir / summary.export_filename
        try:
            target.write_text(summary.report(), encoding="utf-8")
        except OSError:
            self._write("\nFailed to export summary.\n")
        else:
            self._write(f"\nSummary exported successfully to {summary.export_filename}!\n")

    def show_monthly_summary(self) -> None:
        """Ask for MM/YYYY, print that month's summary and offer to export it."""
        self._write("Enter month and year (MM/YYYY): ")
        month_year = self._require_length(7, self._input.word())

        self._write(f"\n{_RULE}\n")
        self._write(f"         Monthly Summary: {month_name(month_year[:2])} {month_year[3:7]}\n")
        self._write(f"{_RULE}\n\n")

        summary = self.tracker.monthly_summary(month_year)
        if summary is None:
            self._write("No sales found for this month.\n")
            return

        for date, sales in summary.days.items():
            self._write(f"========== {date} ==========\n")
            for sale in sales:
                self._write(
                    f"- {sale.customer_name} ({sale.product}) - ${format_amount(sale.amount)}\n"
                )
            self._write(f"    Total: ${format_amount(summary.day_totals[date])}\n\n")

        self._write(f"{_DASHES}\nProduct Totals:\n")
        for product, amount in summary.product_totals.items():
            self._write(f"  - {product}: ${format_amount(amount)}\n")

        self._write(f"\n{_DASHES}\n")
        self._write(f"Total Sales: ${format_amount(summary.total)}\n")
        self._write(
            f"Best Day: {summary.best_day} (${format_amount(summary.best_day_amount)})\n"
        )
        self._write(f"{_RULE}\n")
        self._offer_export("monthly", summary)

    def show_yearly_summary(self) -> None:
        """Ask for a year, print its summary and offer to export it."""
        self._write(
            " Please Add all 4 digits of the year you wish to view the summary of \n"
            f" EXAMPLE: {_RED} 2004{_RESET} \n"
        )
        self._write(" Enter year (YYYY): ")
        year = self._input.word()

        self._write(f"\n{_RULE}\n")
        self._write(f"            Yearly Summary: {year}\n")
        self._write(f"{_RULE}\n\n")

        summary = self.tracker.yearly_summary(year)
        if summary is None:
            self._write("No sales found for this year.\n")
            return

        self._write(f"Month Totals:\n{_DASHES}\n")
        for name, amount in summary.calendar_totals:
            self._write(f"  {name}: ${format_amount(amount)}\n")

        self._write(f"\nProduct Totals:\n{_DASHES}\n")
        for product, amount in summary.product_totals.items():
            self._write(f"  {product}: ${format_amount(amount)}\n")

        self._write(f"\nSummary:\n{_DASHES}\n")
        self._write(f"  Total Sales: ${format_amount(summary.total)}\n")
        self._write(
            f"  Best Month: {summary.best_month_name} "
            f"(${format_amount(summary.best_month_amount)})\n"
        )
        self._write(f"{_RULE}\n")
        self._offer_export("yearly", summary)

    def manage_sales(self) -> None:
        """Search sales and optionally delete one of the matches."""
        self._write(f"\n{_RULE}\n             Manage Sales\n{_RULE}\n\n")
        self._write("Enter search term (customer name, product, or date): ")
        matches = self.tracker.search(self._input.line())

        if not matches:
            self._write("\nNo sales found matching your search.\n")
            return

        self._write(f"\n{_RULE}\n             Search Results\n{_RULE}\n\n")
        for number, sale in enumerate(matches, start=1):
            self._write(
                f"{number}. {sale.date} - {sale.customer_name} ({sale.product}) - "
                f"${format_amount(sale.amount)}\n\n"
            )
        self._write(f"{_RULE}\n\n")

        self._write("Select a sale number to delete (0 to cancel): ")
        try:
            choice = int(self._input.word())
        except ValueError:
            choice = 0
        if choice == 0:
            self._write("Cancelled.\n")
            return
        if not 1 <= choice <= len(matches):
            self._write("Invalid selection.\n")
            return

        self._write("Are you sure you want to delete this sale? (Y/N): ")
        if self._input.word()[0] in "Yy":
            self.tracker.remove(matches[choice - 1])
            self.tracker.save(self.manage_filename)
            self._write("Sale deleted successfully!\n")
        else:
            self._write("Deletion cancelled.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive tracker."""
    parser = argparse.ArgumentParser(prog="smartsales", description="Track sales interactively.")
    parser.add_argument("--file", default=SALES_FILENAME, help="sales data file")
    args = parser.parse_args(argv)
    console = Console(filename=args.file)
    try:
        console.run()
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())