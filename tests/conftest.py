import json

import pytest

from sales_analytics import settings


@pytest.fixture
def sales_data():
    """Three sellers: two with sales, one without."""
    return {
        "customers": [{"id": "c1", "first_name": "Ann", "last_name": "Lee"}],
        "products": [
            {"sku": "A", "name": "Widget", "purchase_price": 5},
            {"sku": "B", "name": "Gadget", "purchase_price": 20},
        ],
        "sellers": [
            {"id": "s1", "first_name": "Ivan", "last_name": "Petrov"},
            {"id": "s2", "first_name": "Maria", "last_name": "Ivanova"},
            {"id": "s3", "first_name": "", "last_name": ""},
        ],
        "purchase_records": [
            {
                "seller_id": "s1",
                "total_amount": 100,
                "items": [{"sku": "A", "quantity": 2, "sale_price": 60, "discount": 0}],
            },
            {
                "seller_id": "s2",
                "total_amount": 45,
                "items": [
                    {"sku": "B", "quantity": 1, "sale_price": 50, "discount": 10},
                    {"sku": "A", "quantity": 3, "sale_price": 10},
                ],
            },
            {
                "seller_id": "s1",
                "total_amount": 30,
                "items": [{"sku": "B", "quantity": 1, "sale_price": 30, "discount": 0}],
            },
        ],
    }


@pytest.fixture
def tmp_settings(tmp_path, monkeypatch):
    """Points input/output/log folders at a temporary directory and disables the webhook."""
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    input_dir.mkdir()
    monkeypatch.setattr(settings, "INPUT_DIR", input_dir)
    monkeypatch.setattr(settings, "OUTPUT_DIR", output_dir)
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", True)
    return tmp_path


@pytest.fixture
def write_dataset(tmp_settings):
    def _write(data, name="sales_data_2025-01-15.json"):
        path = settings.INPUT_DIR / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
