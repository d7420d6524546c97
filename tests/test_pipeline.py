import json
from datetime import date
from unittest import mock

import pandas as pd

import main
from sales_analytics import settings
from sales_analytics.pipelines.seller_report import SellerReportPipeline


def test_run_builds_and_saves_report(write_dataset, sales_data):
    write_dataset(sales_data, "sales_data_2025-01-01.json")
    write_dataset(sales_data, "sales_data_2025-01-15.json")
    pipeline = SellerReportPipeline(test_mode=True)

    with mock.patch("sales_analytics.data_handler.requests.post") as post:
        reports = pipeline.run()

    assert [r.seller_id for r in reports] == ["s1", "s2", "s3"]
    assert pipeline.status_summary == {"sales_data_2025-01-15.json": date(2025, 1, 15)}
    post.assert_not_called()

    [csv_path] = settings.OUTPUT_DIR.glob("seller_report_*.csv")
    assert pd.read_csv(csv_path)["Name"].tolist() == ["Ivan Petrov", "Maria Ivanova", "Unknown"]


def test_run_posts_outside_test_mode(write_dataset, sales_data, monkeypatch):
    monkeypatch.setattr(settings, "WEBHOOK_URL", "https://example.test/hook")
    write_dataset(sales_data)

    with mock.patch("sales_analytics.data_handler.requests.post") as post:
        SellerReportPipeline().run()

    _, kwargs = post.call_args
    assert kwargs["json"]["metadata"] == {"sales_data_2025-01-15.json": "2025-01-15"}


def test_run_uses_explicit_input_path(tmp_settings, sales_data, tmp_path):
    other = tmp_path / "march.json"
    other.write_text(json.dumps(sales_data), encoding="utf-8")

    reports = SellerReportPipeline(input_path=other, test_mode=True).run()

    assert len(reports) == 3


def test_run_without_dataset_returns_none(tmp_settings):
    assert SellerReportPipeline(test_mode=True).run() is None
    assert not settings.OUTPUT_DIR.exists()


def test_run_with_invalid_dataset_stops_before_load(write_dataset, sales_data):
    sales_data["purchase_records"] = []
    write_dataset(sales_data)

    assert SellerReportPipeline(test_mode=True).run() is None
    assert not settings.OUTPUT_DIR.exists()


def test_run_with_invalid_options_stops_before_load(write_dataset, sales_data):
    write_dataset(sales_data)

    assert SellerReportPipeline(options={}, test_mode=True).run() is None


def test_main_exit_codes(write_dataset, sales_data, tmp_settings):
    assert main.run_process(["--test"]) == 1

    write_dataset(sales_data)
    assert main.run_process(["--test", "--log-level", "warning"]) == 0
