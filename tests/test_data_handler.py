from unittest.mock import MagicMock, patch

import pytest
import requests

from kirana import data_handler
from kirana.exceptions import CsvFormatError


def test_export_writes_exact_csv_text(tmp_path, make_item):
    path = tmp_path / "inventory.csv"

    data_handler.export_csv([make_item(1, "Rice", target=10, current=2)], path)

    assert path.read_bytes() == (
        b"id,itemName,supplier,vendorCycle,nextOrderDay,targetStock,currentStock\n"
        b'1,"Rice","Acme",Weekly,Monday,10,2'
    )


def test_import_reads_latin1_files(tmp_path):
    path = tmp_path / "legacy.csv"
    path.write_bytes(
        "id,itemName,supplier,vendorCycle,nextOrderDay,targetStock,currentStock\n"
        "1,Café Masala,Acme,Weekly,Monday,4,1".encode("latin-1")
    )

    (item,) = data_handler.import_csv(path)

    assert item.item_name == "Café Masala"


def test_import_propagates_format_errors(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(CsvFormatError):
        data_handler.import_csv(path)


@patch("kirana.data_handler.requests.post")
def test_save_posts_full_catalog(mock_post, make_item):
    mock_post.return_value = MagicMock(status_code=200)

    notice = data_handler.save_to_database([make_item(1, "Rice")], "http://shop.local/")

    assert notice.ok
    assert notice.message == "Data saved to database successfully!"
    url = mock_post.call_args.args[0]
    assert url == "http://shop.local/api/save-inventory"
    assert mock_post.call_args.kwargs["json"] == [
        {
            "id": 1,
            "itemName": "Rice",
            "supplier": "Acme",
            "targetStock": 10,
            "currentStock": 0,
            "vendorCycle": "Weekly",
            "nextOrderDay": "Monday",
        }
    ]


@patch("kirana.data_handler.requests.post")
def test_save_reports_non_ok_response(mock_post, make_item):
    mock_post.return_value = MagicMock(status_code=500)

    notice = data_handler.save_to_database([make_item()], "http://shop.local")

    assert not notice.ok
    assert notice.message == "Failed to save data to database."


@patch("kirana.data_handler.requests.post")
def test_save_reports_network_errors(mock_post, make_item):
    mock_post.side_effect = requests.exceptions.ConnectionError("refused")

    notice = data_handler.save_to_database([make_item()], "http://shop.local")

    assert not notice.ok
    assert notice.message.startswith("Error saving to database:")
    assert "refused" in notice.message


@patch("kirana.data_handler.requests.post")
def test_save_without_base_url_skips_request(mock_post, make_item, monkeypatch):
    monkeypatch.setattr(data_handler.settings, "API_BASE_URL", None)

    notice = data_handler.save_to_database([make_item()])

    assert not notice.ok
    mock_post.assert_not_called()
