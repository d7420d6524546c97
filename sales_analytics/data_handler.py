import json
import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import requests

from . import settings
from . import utils
from .schemas import SellerReport, TopProduct

logger = logging.getLogger(__name__)


def format_top_products(top_products: list[TopProduct]) -> str:
    """Flattens a top-products list into a single CSV cell, e.g. 'A:5; B:2'."""
    return "; ".join(f"{p.sku}:{p.quantity}" for p in top_products)


def reports_to_dataframe(reports: list[SellerReport]) -> pd.DataFrame:
    """One row per seller, with the schema aliases as column headers."""
    rows = []
    for report in reports:
        row = report.model_dump(by_alias=True, exclude={"top_products"})
        row[SellerReport.model_fields["top_products"].alias] = format_top_products(report.top_products)
        rows.append(row)

    columns = [info.alias or name for name, info in SellerReport.model_fields.items()]
    return pd.DataFrame(rows, columns=columns)


def save_outputs(reports: list[SellerReport], filename_base: str) -> list[Path]:
    """Saves the report to CSV and conditionally to JSON, with dated filenames."""
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.json"
    saved = []

    reports_to_dataframe(reports).to_csv(csv_path, index=False)
    logger.info(f"✅ Seller report saved to: {csv_path}")
    saved.append(csv_path)

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json_data = [report.model_dump(mode="json", by_alias=True) for report in reports]
            json.dump(json_data, f, indent=2, ensure_ascii=False)
        logger.info(f"✅ JSON output saved to: {json_path}")
        saved.append(json_path)
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return saved


def post_to_webhook(
    reports: list[SellerReport],
    metadata: Optional[dict[str, Any]] = None,
    report_type: str = "seller",
) -> bool:
    """
    Posts the report rows and run metadata to the webhook.
    Returns True only when the webhook accepted the payload.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} report to webhook: {settings.WEBHOOK_URL}")

    payload = {
        "reportType": report_type,
        "reportData": [report.model_dump(mode="json", by_alias=True) for report in reports],
        "metadata": metadata or {},
    }

    try:
        response = requests.post(settings.WEBHOOK_URL, json=payload, timeout=settings.WEBHOOK_TIMEOUT)
        response.raise_for_status()
        logger.info("✅ Report successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False
