"""
Sample catalog for the fixture backend
Shops and products from Sector-17, Chandigarh
"""
from typing import Dict, List

from storefront.commerce.models import Category, Product, Shop

CATEGORIES: List[Category] = [
    Category(id="1", name="Clothing"),
    Category(id="2", name="Electronics"),
    Category(id="3", name="Food"),
    Category(id="4", name="Books"),
    Category(id="5", name="Footwear"),
    Category(id="6", name="Accessories"),
    Category(id="7", name="Home Decor"),
]

SHOPS: List[Shop] = [
    Shop(
        id="1",
        name="Gupta Garments",
        category="Clothing",
        description="Premium ethnic and western wear for all occasions. Family-owned business since 1985.",
        address="Shop 15, Sector-17, Chandigarh",
        contact="+91-9876543210",
        image_url="https://images.unsplash.com/photo-1571854003494-ab1b14c21249?w=800",
    ),
    Shop(
        id="2",
        name="Tech Galaxy",
        category="Electronics",
        description="Latest gadgets, smartphones, and electronics at competitive prices.",
        address="Shop 22, Sector-17, Chandigarh",
        contact="+91-9876543211",
        image_url="https://images.unsplash.com/photo-1660224319984-4af12c1a469b?w=800",
    ),
    Shop(
        id="3",
        name="Sharma Sweets",
        category="Food",
        description="Traditional Indian sweets and snacks. Famous for our ladoos and barfis.",
        address="Shop 8, Sector-17, Chandigarh",
        contact="+91-9876543212",
        image_url="https://images.unsplash.com/photo-1640720707320-af5502f2a3f5?w=800",
    ),
    Shop(
        id="4",
        name="Book Haven",
        category="Books",
        description="Vast collection of fiction, non-fiction, and academic books.",
        address="Shop 31, Sector-17, Chandigarh",
        contact="+91-9876543213",
        image_url="https://images.unsplash.com/photo-1740064038378-b3b049c98c39?w=800",
    ),
    Shop(
        id="5",
        name="Footwear Palace",
        category="Footwear",
        description="Branded shoes, sandals, and sports footwear for men, women, and kids.",
        address="Shop 19, Sector-17, Chandigarh",
        contact="+91-9876543214",
        image_url="https://images.unsplash.com/photo-1571854003494-ab1b14c21249?w=800",
    ),
    Shop(
        id="6",
        name="Style Studio",
        category="Accessories",
        description="Trendy accessories including bags, watches, jewelry, and sunglasses.",
        address="Shop 27, Sector-17, Chandigarh",
        contact="+91-9876543215",
        image_url="https://images.unsplash.com/photo-1660224319984-4af12c1a469b?w=800",
    ),
]

def _product(id: str, name: str, description: str, price: float, category: str,
             image: str, shop: Shop) -> Product:
    return Product(
        id=id,
        name=name,
        description=description,
        price=price,
        category=category,
        image_url=f"https://images.unsplash.com/{image}?w=500",
        shop_id=shop.id,
        shop_name=shop.name,
    )

_gupta, _tech, _sharma, _books, _footwear, _style = SHOPS

PRODUCTS: List[Product] = [
    _product("1", "Cotton Kurta Set", "Comfortable cotton kurta with matching pajama. Perfect for summer.",
             1499, "Clothing", "photo-1583743814966-8936f5b7be1a", _gupta),
    _product("2", "Silk Saree", "Elegant silk saree with traditional border work.",
             3999, "Clothing", "photo-1610030469983-98e550d6193c", _gupta),
    _product("3", "Wireless Earbuds", "Premium sound quality with active noise cancellation.",
             2999, "Electronics", "photo-1590658165737-15a047b7a0b8", _tech),
    _product("4", "Smartphone", "Latest model with 128GB storage and 48MP camera.",
             24999, "Electronics", "photo-1511707171634-5f897ff02aa9", _tech),
    _product("5", "Kaju Katli (500g)", "Premium cashew sweets made with pure ghee.",
             450, "Food", "photo-1640720707320-af5502f2a3f5", _sharma),
    _product("6", "Gulab Jamun Box", "Soft and delicious gulab jamuns, pack of 12.",
             180, "Food", "photo-1631452180519-c014fe946bc7", _sharma),
    _product("7", "The Great Gatsby", "Classic novel by F. Scott Fitzgerald.",
             299, "Books", "photo-1543002588-bfa74002ed7e", _books),
    _product("8", "Atomic Habits", "Bestselling self-help book by James Clear.",
             450, "Books", "photo-1589829085413-56de8ae18c73", _books),
    _product("9", "Running Shoes", "Lightweight sports shoes with excellent grip.",
             2499, "Footwear", "photo-1542291026-7eec264c27ff", _footwear),
    _product("10", "Casual Sneakers", "Trendy sneakers for everyday wear.",
             1799, "Footwear", "photo-1549298916-b41d501d3772", _footwear),
    _product("11", "Leather Wallet", "Genuine leather wallet with multiple card slots.",
             899, "Accessories", "photo-1627123424574-724758594e93", _style),
    _product("12", "Designer Sunglasses", "UV protection sunglasses with polarized lenses.",
             1299, "Accessories", "photo-1511499767150-a48a237f0083", _style),
    _product("13", "Formal Shirt", "Premium quality formal shirt for office wear.",
             1199, "Clothing", "photo-1602810318383-e386cc2a3ccf", _gupta),
    _product("14", "Bluetooth Speaker", "Portable wireless speaker with 12-hour battery life.",
             1899, "Electronics", "photo-1608043152269-423dbba4e7e1", _tech),
    _product("15", "Samosa (6 pcs)", "Crispy samosas filled with spiced potatoes.",
             60, "Food", "photo-1601050690597-df0568f70950", _sharma),
]

# Plain-text credentials; the fixture backend has no real authentication
ADMIN_USERS: List[Dict[str, str]] = [
    {"email": "admin@sector17.com", "password": "admin123"},
]
