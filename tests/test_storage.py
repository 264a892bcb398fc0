import json

from kirana.storage import LocalSnapshot


def test_missing_file_loads_empty(local_snapshot):
    assert local_snapshot.load() == []


def test_save_then_load(local_snapshot, make_item):
    items = [make_item(1, "Rice"), make_item(2, "Oil", vendorCycle="Bi-Weekly")]

    local_snapshot.save(items)

    assert local_snapshot.load() == items


def test_saved_records_use_record_field_names(local_snapshot, make_item):
    local_snapshot.save([make_item(1, "Rice", target=10, current=2)])

    slots = json.loads(local_snapshot.path.read_text(encoding="utf-8"))

    assert slots["kiranaStockItems"] == [
        {
            "id": 1,
            "itemName": "Rice",
            "supplier": "Acme",
            "targetStock": 10,
            "currentStock": 2,
            "vendorCycle": "Weekly",
            "nextOrderDay": "Monday",
        }
    ]


def test_other_keys_are_preserved(local_snapshot, make_item):
    local_snapshot.path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    local_snapshot.save([make_item()])

    slots = json.loads(local_snapshot.path.read_text(encoding="utf-8"))
    assert slots["theme"] == "dark"


def test_unparsable_file_loads_empty(local_snapshot):
    local_snapshot.path.write_text("{not json", encoding="utf-8")
    assert local_snapshot.load() == []


def test_invalid_records_load_empty(local_snapshot):
    local_snapshot.path.write_text(
        json.dumps({"kiranaStockItems": [{"id": 1, "itemName": "Rice"}]}),
        encoding="utf-8",
    )
    assert local_snapshot.load() == []


def test_custom_key(tmp_path, make_item):
    path = tmp_path / "store.json"
    LocalSnapshot(path, key="other").save([make_item()])

    assert LocalSnapshot(path).load() == []
    assert len(LocalSnapshot(path, key="other").load()) == 1


def test_non_utf8_file_loads_empty(local_snapshot):
    local_snapshot.path.write_bytes(b"\xff\xfe\x00garbage")
    assert local_snapshot.load() == []


def test_save_over_non_utf8_file_replaces_it(local_snapshot, make_item):
    local_snapshot.path.write_bytes(b"\xff\xfe\x00garbage")

    local_snapshot.save([make_item()])

    assert local_snapshot.load() == [make_item()]
