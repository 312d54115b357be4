# smartsales

A small console sales tracker. Each sale records a customer name, a product,
a date (`MM/DD/YYYY`) and a dollar amount. Sales are kept in a plain text
file, and the tracker prints monthly and yearly summaries with per-day,
per-month and per-product totals. A summary can be exported to a text file.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
smartsales
```

By default the sales are read from and saved to `SALE_data.txt` in the
current directory. Use `--file` to pick another data file:

```
smartsales --file my_sales.txt
```

If the data file does not exist, the menu says so and starts with no sales.
If a stored line has an amount that is not a number, the command prints an
error and exits with status 1.

The menu offers:

1. **Add Sale**: enter customer name, product, date and dollar amount. The
   date must be exactly 10 characters long (for example `04/12/2024`); you are
   asked again until it is. The amount is asked for again until it is a
   number. The sale is saved straight away to the data file.
2. **Monthly Summary**: enter `MM/YYYY` (exactly 7 characters). The sales of
   that month are listed by day, with a total for each day, totals for each
   product, the month's total and its best day. You may then export it to
   `summaryMM_YYYY.txt` in the current directory.
3. **Yearly Summary**: enter a year such as `2024`. The totals for each month
   (in calendar order) and each product are listed, with the year's total and
   its best month. You may export it to `summary_YYYY.txt` in the current
   directory.
4. **Manage Sales**: enter a search term; sales whose customer, product or
   date contains it (ignoring case) are listed with numbers. Choose one to
   delete, or `0` to cancel, then confirm with `Y`.
5. **Exit**

The menu also ends when input runs out.

## Data file

Each line of the data file holds one sale as four comma-separated fields:

```
Jane Doe,OIL,04/12/2024,12.24
```

Amounts are written with up to six significant digits. When loading, blank
lines and lines containing `===` are skipped, and fields after the fourth are
ignored. Commas are not escaped, so a name or product containing a comma does
not load back the same way.

## Library use

```python
from smartsales.sale import Sale
from smartsales.tracker import SalesTracker

tracker = SalesTracker()
tracker.add_sale(Sale("Jane Doe", "OIL", "04/12/2024", 12.24))
tracker.add_sale(Sale("John Roe", "Filter", "04/15/2024", 8.50))

summary = tracker.monthly_summary("04/2024")
print(summary.report())

print(tracker.yearly_summary("2024").report())

for sale in tracker.search("jane"):
    tracker.remove(sale)

tracker.save("sales.txt")
```

- `smartsales.sale.Sale` is a frozen dataclass with `customer_name`,
  `product`, `date` and `amount`. `to_file_string()` gives its data-file line;
  `Sale.from_file_string(line)` parses one and raises `ValueError` when the
  line has fewer than four fields or the amount is not a number.
- `smartsales.tracker.SalesTracker` holds sales in order and supports `len()`
  and iteration. `load(filename)` appends the sales in a file and returns
  `False` if the file does not exist; `save(filename)` replaces the file with
  every sale. `search(term)` returns the matching sales; `remove(sale)` raises
  `ValueError` if the sale is not tracked.
- `monthly_summary("MM/YYYY")` returns a `MonthlySummary` (sales and totals
  by date, totals by product, overall total, best day, export file name), and
  `yearly_summary("YYYY")` returns a `YearlySummary` (totals by month and
  product, overall total, best month, export file name). Both return `None`
  when there are no sales in that period, and both have `report()`, the text
  written when exporting. The best day or month is the earliest one with the
  largest total; when no total is above zero it is left empty.
- `month_name("04")` gives `"April"` (or `"Unknown"`), and
  `format_amount(12.5)` gives `"12.50"`.

## Limitations

- Sales cannot be edited, only added or deleted.
- Deleting a sale from the menu saves the remaining sales to
  `sales_2025.txt` in the current directory, not to the data file given with
  `--file`; the data file is next rewritten when a sale is added.
- Dates are checked only for their length, not for being valid dates, and the
  year entered for a yearly summary is not checked at all.

## Running the tests

```
pip install .[test]
pytest
```