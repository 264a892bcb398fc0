import pytest

from kirana.schemas import Item
from kirana.storage import LocalSnapshot


@pytest.fixture
def make_item():
    def _make_item(item_id=1, name="Rice", target=10, current=0, **overrides):
        data = {
            "id": item_id,
            "itemName": name,
            "supplier": "Acme",
            "targetStock": target,
            "currentStock": current,
            "vendorCycle": "Weekly",
            "nextOrderDay": "Monday",
        }
        data.update(overrides)
        return Item.model_validate(data)

    return _make_item


@pytest.fixture
def candidate():
    return {
        "itemName": "Basmati Rice",
        "supplier": "Sharma Traders",
        "targetStock": 20,
        "currentStock": 5,
        "vendorCycle": "Bi-Weekly",
        "nextOrderDay": "Wednesday",
    }


@pytest.fixture
def local_snapshot(tmp_path):
    return LocalSnapshot(tmp_path / "local_storage.json")
