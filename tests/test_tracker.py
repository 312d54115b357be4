import pytest

from smartsales.sale import Sale
from smartsales.tracker import (
    SalesTracker,
    format_amount,
    month_name,
)


@pytest.fixture
def sales():
    return [
        Sale("Jhon Smith", "OIL", "04/12/2024", 12.5),
        Sale("Ann Lee", "Tires", "04/03/2024", 80.0),
        Sale("Bo Park", "OIL", "04/12/2024", 20.25),
        Sale("Cy Diaz", "Wipers", "05/01/2024", 15.0),
        Sale("Dee Fox", "OIL", "04/20/2023", 9.0),
    ]


@pytest.fixture
def tracker(sales):
    return SalesTracker(sales)


def test_month_name_known_codes():
    assert month_name("01") == "January"
    assert month_name("12") == "December"


def test_month_name_unknown_code():
    assert month_name("13") == "Unknown"


def test_format_amount_two_decimals():
    assert format_amount(12.5) == "12.50"
    assert format_amount(3) == "3.00"


def test_add_sale_appends(tracker, sales):
    extra = Sale("Eve Ray", "Filter", "06/06/2024", 5.0)
    tracker.add_sale(extra)
    assert list(tracker) == sales + [extra]


def test_save_and_load_round_trip(tmp_path, tracker, sales):
    path = tmp_path / "sales.txt"
    tracker.save(path)
    loaded = SalesTracker()
    assert loaded.load(path) is True
    assert list(loaded) == sales


def test_saved_lines_match_file_strings(tmp_path, tracker, sales):
    path = tmp_path / "sales.txt"
    tracker.save(path)
    assert path.read_text(encoding="utf-8").splitlines() == [s.to_file_string() for s in sales]


def test_load_missing_file(tmp_path):
    tracker = SalesTracker()
    assert tracker.load(tmp_path / "absent.txt") is False
    assert len(tracker) == 0


def test_load_skips_blank_and_banner_lines(tmp_path):
    path = tmp_path / "sales.txt"
    path.write_text(
        "===== header =====\n\nA,B,01/01/2024,1\n\nC,D,02/02/2024,2.5\n", encoding="utf-8"
    )
    tracker = SalesTracker()
    tracker.load(path)
    assert list(tracker) == [Sale("A", "B", "01/01/2024", 1.0), Sale("C", "D", "02/02/2024", 2.5)]


def test_load_bad_amount_raises(tmp_path):
    path = tmp_path / "sales.txt"
    path.write_text("A,B,01/01/2024,oops\n", encoding="utf-8")
    with pytest.raises(ValueError):
        SalesTracker().load(path)


def test_monthly_summary_none_when_empty(tracker):
    assert tracker.monthly_summary("07/2024") is None


def test_monthly_summary_selects_month(tracker, sales):
    summary = tracker.monthly_summary("04/2024")
    included = [s for day in summary.days.values() for s in day]
    assert sorted(included, key=sales.index) == [s for s in sales if s.date.endswith("2024") and s.date.startswith("04")]


def test_monthly_summary_days_sorted(tracker):
    summary = tracker.monthly_summary("04/2024")
    assert list(summary.days) == sorted(summary.days)
    assert list(summary.day_totals) == list(summary.days)


def test_monthly_summary_totals_consistent(tracker):
    summary = tracker.monthly_summary("04/2024")
    assert summary.total == pytest.approx(sum(summary.day_totals.values()))
    assert summary.total == pytest.approx(sum(summary.product_totals.values()))
    for date, day in summary.days.items():
        assert summary.day_totals[date] == pytest.approx(sum(s.amount for s in day))


def test_monthly_summary_best_day(tracker):
    summary = tracker.monthly_summary("04/2024")
    assert summary.best_day_amount == max(summary.day_totals.values())
    assert summary.day_totals[summary.best_day] == summary.best_day_amount


def test_monthly_summary_tie_prefers_earliest_date():
    tracker = SalesTracker([Sale("A", "X", "03/09/2024", 10.0), Sale("B", "X", "03/02/2024", 10.0)])
    assert tracker.monthly_summary("03/2024").best_day == "03/02/2024"


def test_monthly_summary_names_and_filename(tracker):
    summary = tracker.monthly_summary("04/2024")
    assert summary.month_name == "April"
    assert summary.year == "2024"
    assert summary.export_filename == "summary04_2024.txt"


def test_monthly_report_text(tracker):
    summary = tracker.monthly_summary("04/2024")
    report = summary.report()
    assert report.startswith("Monthly Summary: April 2024\n-------------------------\n\n")
    assert f"Total Sales: ${format_amount(summary.total)}\n" in report
    assert report.endswith(
        f"Best Day: {summary.best_day} (${format_amount(summary.best_day_amount)})\n"
    )
    assert "- Jhon Smith (OIL) - $" + format_amount(12.5) in report


def test_yearly_summary_none_when_empty(tracker):
    assert tracker.yearly_summary("1999") is None


def test_yearly_summary_totals_consistent(tracker):
    summary = tracker.yearly_summary("2024")
    assert summary.total == pytest.approx(sum(summary.month_totals.values()))
    assert summary.total == pytest.approx(sum(summary.product_totals.values()))
    assert set(summary.month_totals) == {"04", "05"}


def test_yearly_summary_best_month(tracker):
    summary = tracker.yearly_summary("2024")
    assert summary.best_month == "04"
    assert summary.best_month_name == "April"
    assert summary.best_month_amount == summary.month_totals["04"]
    assert summary.export_filename == "summary_2024.txt"


def test_yearly_calendar_totals_in_calendar_order(tracker):
    summary = tracker.yearly_summary("2024")
    assert [name for name, _ in summary.calendar_totals] == ["April", "May"]


def test_yearly_report_text(tracker):
    summary = tracker.yearly_summary("2024")
    report = summary.report()
    assert report.startswith("Yearly Summary: 2024\n-------------------------\n\n")
    assert f"April: ${format_amount(summary.month_totals['04'])}\n" in report
    assert "Total Sales by Product:\n" in report
    assert report.endswith(
        f"Best Month: April (${format_amount(summary.best_month_amount)})\n"
    )


def test_search_is_case_insensitive(tracker, sales):
    assert tracker.search("oil") == [s for s in sales if s.product == "OIL"]


def test_search_matches_customer_and_date(tracker, sales):
    assert tracker.search("ann") == [sales[1]]
    assert tracker.search("2023") == [sales[4]]


def test_search_no_match(tracker):
    assert tracker.search("zzz") == []


def test_remove_sale(tracker, sales):
    tracker.remove(sales[2])
    assert list(tracker) == sales[:2] + sales[3:]


def test_remove_missing_raises(tracker):
    with pytest.raises(ValueError):
        tracker.remove(Sale("Nobody", "None", "01/01/2000", 1.0))