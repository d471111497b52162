import pytest

from sales_dashboard.analytics.query import build_transaction_query, list_transactions
from sales_dashboard.data.schemas import parse_month, MonthFilter
from sales_dashboard.errors import InvalidRequest


@pytest.mark.parametrize("name,expected", [("January", 1), ("March", 3), ("December", 12)])
def test_parse_month_maps_names_to_index(name, expected):
    assert parse_month(name) == expected


@pytest.mark.parametrize("name", [None, "", "   "])
def test_parse_month_missing_is_invalid_request(name):
    with pytest.raises(InvalidRequest, match="Month parameter is required"):
        parse_month(name)


@pytest.mark.parametrize("name", ["march", "MARCH", "Mar", "13", "Smarch"])
def test_parse_month_is_case_sensitive_and_exact(name):
    with pytest.raises(InvalidRequest, match="Invalid month format"):
        parse_month(name)


def test_build_query_defaults():
    query = build_transaction_query("March")
    assert query.month_filter == MonthFilter(3)
    assert query.search == ""
    assert query.page == 1
    assert query.per_page == 4
    assert (query.skip, query.limit) == (0, 4)


def test_build_query_pagination_bounds():
    query = build_transaction_query("March", page="3", per_page="10")
    assert (query.skip, query.limit) == (20, 10)


@pytest.mark.parametrize("page,per_page", [(0, 4), (1, 0), (-1, 4), ("x", 4), (1, "2.5")])
def test_build_query_rejects_non_positive_paging(page, per_page):
    with pytest.raises(InvalidRequest):
        build_transaction_query("March", page=page, per_page=per_page)


def test_month_only_returns_first_page_in_id_order(store):
    rows = list_transactions(store, build_transaction_query("March"))
    assert [r["id"] for r in rows] == [1, 2, 3, 4]


def test_pages_do_not_overlap(store):
    page1 = list_transactions(store, build_transaction_query("March", page=1, per_page=4))
    page2 = list_transactions(store, build_transaction_query("March", page=2, per_page=4))
    page3 = list_transactions(store, build_transaction_query("March", page=3, per_page=4))

    assert len(page1) <= 4
    assert [r["id"] for r in page2] == [5, 7]
    assert not {r["id"] for r in page1} & {r["id"] for r in page2}
    assert page3 == []


def test_search_matches_title_case_insensitively(store):
    rows = list_transactions(store, build_transaction_query("March", search="JACKET"))
    assert [r["title"] for r in rows] == ["Womens Rain Jacket"]


def test_search_matches_description(store):
    rows = list_transactions(store, build_transaction_query("March", search="perfect", per_page=10))
    assert [r["id"] for r in rows] == [1, 7]


def test_numeric_search_matches_price_within_month(store):
    rows = list_transactions(store, build_transaction_query("March", search="150", per_page=10))
    # The April record priced 150 is outside the month filter
    assert [r["id"] for r in rows] == [3]
    assert rows[0]["price"] == 150


def test_numeric_search_also_matches_text(store):
    rows = list_transactions(store, build_transaction_query("March", search="3.0", per_page=10))
    assert [r["id"] for r in rows] == [4]


def test_search_is_literal_not_regex(store):
    rows = list_transactions(store, build_transaction_query("March", search=".*", per_page=10))
    assert rows == []


def test_rows_are_json_ready(store):
    row = list_transactions(store, build_transaction_query("January"))[0]
    assert row == {
        "id": 8,
        "title": "Acer Monitor",
        "description": "21.5 inches Full HD",
        "price": 599.0,
        "dateOfSale": "2022-01-12T11:00:00+00:00",
        "category": "electronics",
        "sold": False,
    }


@pytest.mark.parametrize("search", ["1_50", "0x96", "150abc", "١٥٠"])
def test_non_decimal_search_does_not_match_price(store, search):
    assert list_transactions(store, build_transaction_query("March", search=search, per_page=10)) == []


@pytest.mark.parametrize("search", ["150", "150.0", " 150 ", "+150", "1.5e2"])
def test_decimal_search_forms_match_price(store, search):
    rows = list_transactions(store, build_transaction_query("March", search=search, per_page=10))
    assert [r["id"] for r in rows] == [3]
