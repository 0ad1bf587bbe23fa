import pytest

from storefront.commerce.factory import reset_catalog_backend
from storefront.commerce.fixture_backend import FixtureBackend
from storefront.commerce.interface import CatalogBackend
from storefront.commerce.models import Envelope, ProductInput, ShopInput
from storefront.services.catalog import CatalogGateway, get_catalog_gateway, reset_catalog_gateway


class FakeBackend(CatalogBackend):
    """Backend double that answers canned envelopes and records writes."""

    provider = "fake"

    def __init__(self, shops=None, categories=None):
        self.shops = shops if shops is not None else [{"id": "1", "name": "Gupta Garments"}]
        self.categories = categories or Envelope.ok([])
        self.calls = []

    async def search_products(self, query="", filters=None):
        self.calls.append(("search_products", query, filters))
        return Envelope.ok([])

    async def get_shops(self):
        return Envelope.ok(self.shops)

    async def get_shop_by_id(self, shop_id):
        return Envelope.ok({"shop": None, "products": []})

    async def get_categories(self):
        return self.categories

    async def get_products(self):
        return Envelope.ok([])

    async def admin_login(self, email, password):
        return Envelope.fail("Invalid credentials")

    async def add_shop(self, shop, session=None):
        self.calls.append(("add_shop", shop, session))
        return Envelope.ok()

    async def update_shop(self, shop_id, shop, session=None):
        self.calls.append(("update_shop", shop_id, shop, session))
        return Envelope.ok()

    async def delete_shop(self, shop_id, session=None):
        self.calls.append(("delete_shop", shop_id, session))
        return Envelope.ok()

    async def add_product(self, product, session=None):
        self.calls.append(("add_product", product, session))
        return Envelope.ok(product)

    async def update_product(self, product_id, product, session=None):
        self.calls.append(("update_product", product_id, product, session))
        return Envelope.ok(product)

    async def delete_product(self, product_id, session=None):
        self.calls.append(("delete_product", product_id, session))
        return Envelope.ok()


@pytest.mark.asyncio
async def test_gateway_delegates_to_injected_backend(session):
    backend = FakeBackend()
    gateway = CatalogGateway(backend)

    await gateway.search_products("kurta")
    await gateway.add_shop(ShopInput(name="Chai Point"), session)
    await gateway.delete_product("4", session)

    assert gateway.provider == "fake"
    assert backend.calls[0] == ("search_products", "kurta", None)
    assert backend.calls[1][0] == "add_shop"
    assert backend.calls[1][2] is session
    assert backend.calls[2] == ("delete_product", "4", session)


@pytest.mark.asyncio
async def test_product_writes_take_shop_name_from_shop_id(gateway):
    product = ProductInput(name="Laptop Sleeve", price=799, category="Accessories", shop_id="2", shop_name="Old Name")

    added = await gateway.add_product(product)
    updated = await gateway.update_product("11", product)

    assert added.data.shop_name == "Tech Galaxy"
    assert updated.data.shop_name == "Tech Galaxy"
    assert updated.data.id == "11"
    assert product.shop_name == "Old Name"


@pytest.mark.asyncio
async def test_unknown_shop_id_clears_shop_name(gateway):
    product = ProductInput(name="Mystery Item", shop_id="999", shop_name="Gupta Garments")

    result = await gateway.add_product(product)

    assert result.data.shop_name == ""


@pytest.mark.asyncio
async def test_shop_name_lookup_reads_remote_style_dicts(session):
    backend = FakeBackend(shops=[{"id": "1", "name": "Gupta Garments"}, {"id": "8", "name": "Chai Point"}])
    gateway = CatalogGateway(backend)

    await gateway.add_product(ProductInput(name="Masala Chai", shop_id="8"), session)

    _, written, passed_session = backend.calls[-1]
    assert written.shop_name == "Chai Point"
    assert passed_session is session


class ShopsDownBackend(FakeBackend):
    async def get_shops(self):
        return Envelope.fail("shops unavailable")


@pytest.mark.asyncio
async def test_product_writes_abort_when_shops_cannot_be_read(session):
    backend = ShopsDownBackend()
    gateway = CatalogGateway(backend)
    product = ProductInput(name="Masala Chai", shop_id="3", shop_name="Sharma Sweets")

    added = await gateway.add_product(product, session)
    updated = await gateway.update_product("6", product, session)

    for result in (added, updated):
        assert result.success is False
        assert result.error == "shops unavailable"
        assert result.data is None
    assert backend.calls == []


@pytest.mark.asyncio
async def test_dashboard_stats_count_the_catalog(gateway):
    result = await gateway.get_dashboard_stats()

    assert result.success is True
    assert result.data.total_shops == 6
    assert result.data.total_products == 15
    assert result.data.categories == 7


@pytest.mark.asyncio
async def test_dashboard_stats_pass_through_backend_failures():
    gateway = CatalogGateway(FakeBackend(categories=Envelope.fail("categories unavailable")))

    result = await gateway.get_dashboard_stats()

    assert result.success is False
    assert result.error == "categories unavailable"


@pytest.mark.asyncio
async def test_login_failure_is_returned_not_raised():
    result = await CatalogGateway(FakeBackend()).admin_login("admin@sector17.com", "wrong")

    assert result.success is False
    assert result.error == "Invalid credentials"


def test_get_catalog_gateway_uses_configured_backend():
    reset_catalog_backend()
    reset_catalog_gateway()
    try:
        gateway = get_catalog_gateway()

        assert isinstance(gateway.backend, FixtureBackend)
        assert get_catalog_gateway() is gateway
    finally:
        reset_catalog_gateway()
        reset_catalog_backend()


@pytest.mark.asyncio
async def test_open_session_wraps_a_successful_login(gateway):
    session = await gateway.open_session("admin@sector17.com", "admin123")

    assert session.email == "admin@sector17.com"
    assert session.token.startswith("mock_jwt_token_")


@pytest.mark.asyncio
async def test_open_session_is_none_when_rejected(gateway):
    assert await gateway.open_session("admin@sector17.com", "wrong") is None
