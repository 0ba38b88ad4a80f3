import json

from src.samia_suite.samia_suite.core.enums import Site
from src.samia_suite.samia_suite.stock.model import StockItem
from src.samia_suite.samia_suite.storage.json_store import read_json, read_list, write_json
from src.samia_suite.samia_suite.storage.keys import STOCK_ITEMS, site_key
from src.samia_suite.samia_suite.storage.records import load_records


def test_site_key_uses_site_name():
    assert site_key(STOCK_ITEMS, Site.FNIDEQ) == "samia_stock_items_Fnideq"
    assert site_key("vouchers", Site.MDIQ) == "samia_vouchers_M'diq"


def test_read_json_missing_and_placeholder_values_give_fallback(store):
    assert read_json(store, "k", {"a": 1}) == {"a": 1}
    store.set_item("k", "undefined")
    assert read_json(store, "k", []) == []
    store.set_item("k", "null")
    assert read_json(store, "k", 0) == 0


def test_read_json_drops_corrupted_key(store, caplog):
    store.set_item("k", "{not json")

    assert read_json(store, "k", []) == []
    assert store.get_item("k") is None
    assert "Corrupted" in caplog.text


def test_read_list_rejects_non_list(store):
    store.set_item("k", json.dumps({"a": 1}))

    assert read_list(store, "k") == []
    assert store.get_item("k") is None


def test_write_json_keeps_accents_readable(store):
    write_json(store, "k", {"site": "Siège Social"})
    assert "Siège" in store.get_item("k")


def test_one_malformed_record_resets_the_whole_array(store):
    key = site_key(STOCK_ITEMS, Site.FNIDEQ)
    store.set_item(key, json.dumps([{"id": "a"}]))

    assert load_records(store, key, StockItem.from_dict) == []
    assert store.get_item(key) is None
