"""Unit tests for the in-memory store."""

import re

from erp_api.app.core.store import InMemoryStore, document_number, new_id, registered_stores
from erp_api.app.schemas.base import Record


class Item(Record):
    name: str
    status: str = "open"


def test_new_id_format():
    assert re.fullmatch(r"[a-z0-9]{9}", new_id())


def test_document_number():
    assert re.fullmatch(r"INV-\d+", document_number("INV"))


def test_filter_ignores_none_criteria():
    store = InMemoryStore("test.items")
    first = store.add(Item(company_id="a", name="one"))
    store.add(Item(company_id="a", name="two", status="closed"))
    store.add(Item(company_id="b", name="three"))

    assert [i.name for i in store.filter(company_id="a", status=None)] == ["one", "two"]
    assert store.filter(company_id="a", status="open") == [first]
    assert [i.name for i in store.filter(predicate=lambda i: i.status == "open")] == ["one", "three"]


def test_get_owned():
    store = InMemoryStore("test.owned")
    item = store.add(Item(company_id="a", name="one"))
    assert store.get_owned(item.id, "a") is item
    assert store.get_owned(item.id, "b") is None
    assert store.delete(item.id)
    assert len(store) == 0


def test_stores_register_themselves():
    store = InMemoryStore("test.registered")
    assert store in registered_stores()
