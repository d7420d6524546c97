import json
import os
from datetime import date

from sales_analytics import utils


def test_extract_file_date_from_name(tmp_path):
    path = tmp_path / "sales_data_2025-03-07.json"
    path.write_text("{}")
    assert utils.extract_file_date(path) == date(2025, 3, 7)


def test_extract_file_date_falls_back_to_mtime(tmp_path):
    path = tmp_path / "sales_data_latest.json"
    path.write_text("{}")
    os.utime(path, (0, 1_700_000_000))
    assert utils.extract_file_date(path) == date.fromtimestamp(1_700_000_000)


def test_find_latest_report_picks_newest_date(tmp_path):
    for name in ["sales_data_2025-01-01.json", "sales_data_2025-02-01.json", "other_2025-12-01.json"]:
        (tmp_path / name).write_text("{}")

    path, file_date = utils.find_latest_report(tmp_path, "sales_data_")

    assert path.name == "sales_data_2025-02-01.json"
    assert file_date == date(2025, 2, 1)


def test_find_latest_report_none_when_missing(tmp_path):
    assert utils.find_latest_report(tmp_path, "sales_data_") is None
    assert utils.find_latest_report(tmp_path / "nope", "sales_data_") is None


def test_load_json_handles_bom_and_latin1(tmp_path):
    bom = tmp_path / "bom.json"
    bom.write_bytes(b"\xef\xbb\xbf" + json.dumps({"sellers": [1]}).encode("utf-8"))
    latin = tmp_path / "latin.json"
    latin.write_bytes('{"name": "Jos\xe9"}'.encode("latin-1"))

    assert utils.load_json(bom) == {"sellers": [1]}
    assert utils.load_json(latin) == {"name": "José"}


def test_load_json_returns_none_on_bad_input(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")

    assert utils.load_json(broken) is None
    assert utils.load_json(tmp_path / "missing.json") is None
