"""
Catalog Data Models
Shared shapes for shops, products and the response envelope returned
by every catalog backend
"""
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

class Category(BaseModel):
    """Category used for filter enumeration only"""
    id: str
    name: str

class ShopInput(BaseModel):
    """Shop fields as submitted by the admin form"""
    name: str
    category: str = ""
    description: str = ""
    address: str = ""
    contact: str = ""
    image_url: str = ""

class Shop(ShopInput):
    id: str

class ProductInput(BaseModel):
    """
    Product fields as submitted by the admin form

    shop_name is a denormalized copy of the owning shop's name and
    must match the shop referenced by shop_id when written.
    """
    name: str
    description: str = ""
    price: float = 0
    category: str = ""
    image_url: str = ""
    shop_id: str = ""
    shop_name: str = ""

class Product(ProductInput):
    id: str

class FilterSet(BaseModel):
    """Conjunctive filters applied to a product search"""
    model_config = ConfigDict(populate_by_name=True)

    category: str = "all"
    shop: str = "all"
    min_price: Optional[float] = Field(default=0, alias="minPrice")
    max_price: Optional[float] = Field(default=50000, alias="maxPrice")

class ShopDetails(BaseModel):
    shop: Optional[Shop] = None
    products: List[Product] = Field(default_factory=list)

class LoginResult(BaseModel):
    token: str
    email: str

class AdminSession(BaseModel):
    """
    Credential held by the caller after a successful login

    The token is opaque: backends forward it, nothing here interprets it.
    """
    token: str
    email: Optional[str] = None

    @classmethod
    def from_login(cls, result) -> "AdminSession":
        """Build a session from LoginResult or the raw dict a remote backend returns"""
        if isinstance(result, dict):
            return cls(token=result["token"], email=result.get("email"))
        return cls(token=result.token, email=result.email)

class DashboardStats(BaseModel):
    total_shops: int
    total_products: int
    categories: int

class Envelope(BaseModel, Generic[T]):
    """
    Uniform {success, data, error} response wrapper

    Remote backends build envelopes with model_construct, so data holds
    whatever JSON the service returned.
    """
    model_config = ConfigDict(extra="allow")

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data=None) -> "Envelope":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "Envelope":
        return cls(success=False, error=error)

    def to_wire(self) -> dict:
        """Serialize for JSON transport, dropping unset members"""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
