from decimal import Decimal

import pytest

from product_catalog.application.product_service import ProductService
from product_catalog.core.exceptions import (
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from product_catalog.interfaces.http.schemas import ProductPayload


@pytest.fixture
def service(store):
    return ProductService(store=store)


def _payload(**overrides):
    data = {"name": "Tablet", "price": "499.99", "category": "Electronics"}
    data.update(overrides)
    return ProductPayload(**data)


def test_get_unknown_id_returns_empty_list(service):
    assert service.get_product("P999") == []


def test_get_known_id_returns_singleton(service):
    products = service.get_product("P002")

    assert [p.id for p in products] == ["P002"]


def test_create_generates_id(service):
    assert service.create_product(_payload()).id == "P4"
    assert service.create_product(_payload()).id == "P5"


@pytest.mark.parametrize("blank", ["", "   "])
def test_create_treats_blank_id_as_missing(service, blank):
    assert service.create_product(_payload(id=blank)).id == "P4"


def test_create_does_not_trim_given_id(service, store):
    product = service.create_product(_payload(id=" P001 "))

    assert product.id == " P001 "
    assert store.get("P001").name == "Laptop"
    assert store.size() == 4


def test_create_keeps_given_id(service, store):
    product = service.create_product(_payload(id="TAB-1"))

    assert product.id == "TAB-1"
    assert store.get("TAB-1").price == Decimal("499.99")


def test_create_duplicate_leaves_original(service, store):
    with pytest.raises(ProductAlreadyExistsError) as excinfo:
        service.create_product(_payload(id="P001", name="Not a laptop"))

    assert "P001" in excinfo.value.message
    assert store.get("P001").name == "Laptop"


def test_create_never_populates_inventory_fields(service):
    product = service.create_product(_payload())

    assert product.in_stock is False
    assert product.available_quantity is None


def test_update_uses_path_id(service, store):
    product = service.update_product("P001", _payload(id="OTHER", name="Gaming Laptop"))

    assert product.id == "P001"
    assert store.get("P001").name == "Gaming Laptop"
    assert not store.contains_key("OTHER")


def test_update_missing_raises(service, store):
    with pytest.raises(ProductNotFoundError):
        service.update_product("P999", _payload())

    assert not store.contains_key("P999")


def test_delete_then_delete_again(service, store):
    service.delete_product("P001")
    assert not store.contains_key("P001")

    with pytest.raises(ProductNotFoundError):
        service.delete_product("P001")
