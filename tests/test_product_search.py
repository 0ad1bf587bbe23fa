import pytest

from storefront.commerce.mock_data import PRODUCTS, SHOPS
from storefront.commerce.models import FilterSet
from storefront.services.products import find_shop, products_for_shop, search_products


def ids(products):
    return [p.id for p in products]


def satisfies(product, query, filters):
    if query.strip():
        needle = query.lower()
        if not any(needle in field.lower() for field in (product.name, product.shop_name, product.description)):
            return False
    if filters.category != "all" and product.category != filters.category:
        return False
    if filters.shop != "all" and product.shop_name != filters.shop:
        return False
    if filters.min_price is not None and product.price < filters.min_price:
        return False
    if filters.max_price is not None and product.price > filters.max_price:
        return False
    return True


def test_empty_query_with_default_filters_returns_everything():
    assert search_products(PRODUCTS, "", FilterSet()) == PRODUCTS


def test_blank_query_applies_no_text_filter():
    assert ids(search_products(PRODUCTS, "   ", FilterSet())) == ids(PRODUCTS)


def test_no_filters_applies_text_filter_only():
    assert ids(search_products(PRODUCTS, "")) == ids(PRODUCTS)
    assert ids(search_products(PRODUCTS, "book")) == ["7", "8"]


def test_saree_matches_only_silk_saree():
    assert ids(search_products(PRODUCTS, "saree", FilterSet())) == ["2"]


def test_text_match_is_case_insensitive():
    upper = search_products(PRODUCTS, "KURTA", FilterSet())
    lower = search_products(PRODUCTS, "kurta", FilterSet())
    assert upper == lower
    assert ids(lower) == ["1"]


def test_text_matches_shop_name_and_description():
    assert ids(search_products(PRODUCTS, "sharma", FilterSet())) == ["5", "6", "15"]
    assert ids(search_products(PRODUCTS, "noise cancellation", FilterSet())) == ["3"]


def test_category_filter_keeps_original_order():
    result = search_products(PRODUCTS, "", FilterSet(category="Food"))
    assert ids(result) == ["5", "6", "15"]


def test_category_filter_is_case_sensitive():
    assert search_products(PRODUCTS, "", FilterSet(category="food")) == []


def test_shop_filter_matches_by_name():
    assert ids(search_products(PRODUCTS, "", FilterSet(shop="Tech Galaxy"))) == ["3", "4", "14"]


def test_price_range_is_inclusive():
    result = search_products(PRODUCTS, "", FilterSet(minPrice=1000, maxPrice=2000))
    assert ids(result) == ["1", "10", "12", "13", "14"]
    assert "9" not in ids(result)  # Running Shoes at 2499

    edge = search_products(PRODUCTS, "", FilterSet(min_price=1499, max_price=1499))
    assert ids(edge) == ["1"]


def test_missing_price_bounds_impose_no_constraint():
    result = search_products(PRODUCTS, "", FilterSet(min_price=20000, max_price=None))
    assert ids(result) == ["4"]
    assert len(search_products(PRODUCTS, "", FilterSet(min_price=None, max_price=None))) == len(PRODUCTS)


def test_inverted_price_bounds_are_accepted_and_match_nothing():
    assert search_products(PRODUCTS, "", FilterSet(min_price=2000, max_price=1000)) == []


def test_filters_combine_conjunctively():
    filters = FilterSet(category="Electronics", min_price=2000)
    assert ids(search_products(PRODUCTS, "premium", filters)) == ["3"]


@pytest.mark.parametrize(
    "query,filters",
    [
        ("", FilterSet(category="Clothing", max_price=1500)),
        ("e", FilterSet(shop="Style Studio")),
        ("s", FilterSet(min_price=300, max_price=3000)),
        ("premium", FilterSet(category="Food", shop="Sharma Sweets")),
    ],
)
def test_membership_matches_every_active_predicate(query, filters):
    result = search_products(PRODUCTS, query, filters)
    assert ids(result) == [p.id for p in PRODUCTS if satisfies(p, query, filters)]


def test_search_is_idempotent():
    filters = FilterSet(category="Clothing", min_price=1000)
    once = search_products(PRODUCTS, "s", filters)
    assert search_products(once, "s", filters) == once


def test_search_does_not_mutate_input():
    products = list(PRODUCTS)
    search_products(products, "saree", FilterSet(category="Food"))
    assert products == PRODUCTS


def test_find_shop_and_shop_products():
    assert find_shop(SHOPS, "4").name == "Book Haven"
    assert find_shop(SHOPS, "999") is None
    assert ids(products_for_shop(PRODUCTS, "1")) == ["1", "2", "13"]
    assert products_for_shop(PRODUCTS, "999") == []
