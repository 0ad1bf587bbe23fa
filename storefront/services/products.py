"""
Product search for the storefront catalog
Pure filtering over an in-memory product collection
"""
from typing import List, Optional, Sequence

from storefront.commerce.models import FilterSet, Product, Shop

ALL = "all"

def matches_text(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name, shop name or description"""
    needle = query.lower()
    return (
        needle in product.name.lower()
        or needle in product.shop_name.lower()
        or needle in product.description.lower()
    )

def search_products(
    products: Sequence[Product],
    query: str = "",
    filters: Optional[FilterSet] = None
) -> List[Product]:
    """
    Search products by free text and filters

    Args:
        products: Collection to search; its order is preserved
        query: Free text; blank means no text filter
        filters: Category, shop and price filters. None applies none of them

    Returns:
        Products satisfying every active predicate
    """
    results = list(products)

    if query and query.strip():
        results = [p for p in results if matches_text(p, query)]

    if filters is None:
        return results

    if filters.category and filters.category != ALL:
        results = [p for p in results if p.category == filters.category]

    # Matched by shop name, not id: two shops sharing a name are indistinguishable
    if filters.shop and filters.shop != ALL:
        results = [p for p in results if p.shop_name == filters.shop]

    if filters.min_price is not None:
        results = [p for p in results if p.price >= filters.min_price]

    if filters.max_price is not None:
        results = [p for p in results if p.price <= filters.max_price]

    return results

def find_shop(shops: Sequence[Shop], shop_id: str) -> Optional[Shop]:
    """Get shop by ID"""
    for shop in shops:
        if shop.id == shop_id:
            return shop
    return None

def products_for_shop(products: Sequence[Product], shop_id: str) -> List[Product]:
    return [p for p in products if p.shop_id == shop_id]
