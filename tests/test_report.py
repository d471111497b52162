from openpyxl import load_workbook

from sales_dashboard.data.schemas import MonthFilter
from sales_dashboard.reports.statistics_report import generate_json, generate_excel


def test_generate_json(store):
    data = generate_json(store, MonthFilter(3))

    assert data["month"] == "March"
    assert data["statistics"]["totalSaleAmount"] == 1386.23
    assert data["totalItems"] == 6
    assert len(data["barChartData"]) == 10
    assert sum(c["count"] for c in data["pieChartData"]) == 6


def test_generate_excel(store, tmp_path):
    out = generate_excel(store, MonthFilter(3), tmp_path / "march.xlsx")

    assert out == tmp_path / "march.xlsx"
    wb = load_workbook(out)
    assert wb.sheetnames == ["Summary", "By Price Range", "By Category"]

    summary = wb["Summary"]
    assert summary["A1"].value == "SALES STATISTICS"
    assert summary["A7"].value == 1386.23
    assert summary["A8"].value == "TOTAL SALE AMOUNT"

    ranges = wb["By Price Range"]
    assert ranges["A1"].value == "Price Range"
    assert [ranges.cell(row=r, column=1).value for r in range(2, 12)][-1] == "901-above"
    assert ranges["A12"].value == "TOTAL"
    assert ranges["B12"].value == 6

    categories = wb["By Category"]
    assert categories["A2"].value == "electronics"
    assert categories["B2"].value == 2


def test_generate_excel_empty_month(store, tmp_path):
    out = generate_excel(store, MonthFilter(7), tmp_path / "july.xlsx")
    wb = load_workbook(out)
    assert wb["Summary"]["A7"].value == 0
    assert wb["By Category"].max_row == 1
