from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from product_catalog.domain.models import Product
from product_catalog.infrastructure.store.product_store import ProductStore


def _product(product_id, name="Widget", price="9.99"):
    return Product(id=product_id, name=name, price=Decimal(price), category="Misc")


def test_seeded_with_three_products(store):
    products = {p.id: p for p in store.list_all()}

    assert store.size() == 3
    assert products["P001"].name == "Laptop"
    assert products["P002"].name == "Smartphone"
    assert products["P003"].name == "Coffee Maker"
    assert products["P003"].category == "Home Appliances"


def test_empty_store():
    store = ProductStore(seed=None)

    assert store.size() == 0
    assert store.list_all() == []


def test_stores_are_independent():
    first, second = ProductStore(), ProductStore()
    first.remove("P001")

    assert second.contains_key("P001")


def test_get_missing_returns_none(store):
    assert store.get("P999") is None


def test_put_overwrites(store):
    store.put("P001", _product("P001", name="Ultrabook"))

    assert store.get("P001").name == "Ultrabook"
    assert store.size() == 3


def test_remove_is_a_noop_when_absent(store):
    store.remove("P999")
    store.remove("P001")
    store.remove("P001")

    assert store.size() == 2
    assert not store.contains_key("P001")


def test_put_if_absent(store):
    assert store.put_if_absent("P010", _product("P010"))
    assert not store.put_if_absent("P010", _product("P010", name="Other"))
    assert store.get("P010").name == "Widget"


def test_replace_if_present(store):
    assert not store.replace_if_present("P999", _product("P999"))
    assert not store.contains_key("P999")

    assert store.replace_if_present("P002", _product("P002", name="Phone"))
    assert store.get("P002").name == "Phone"


def test_remove_if_present(store):
    assert store.remove_if_present("P003")
    assert not store.remove_if_present("P003")


def test_generate_id_follows_size(store):
    assert store.generate_id() == "P4"
    store.put("P4", _product("P4"))
    assert store.generate_id() == "P5"


def test_generate_id_can_collide_after_delete():
    store = ProductStore(seed=[_product("P1"), _product("P2"), _product("P3")])
    store.remove("P2")

    generated = store.generate_id()

    assert generated == "P3"
    assert not store.put_if_absent(generated, _product(generated))


def test_put_if_absent_has_a_single_winner(store):
    def attempt(n):
        return store.put_if_absent("P100", _product("P100", name=f"racer-{n}"))

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(attempt, range(64)))

    assert results.count(True) == 1
    assert store.size() == 4
