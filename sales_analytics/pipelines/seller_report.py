import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from sales_analytics import data_handler, settings, utils
from sales_analytics.analyzer import analyze
from sales_analytics.errors import SalesAnalysisError
from sales_analytics.pipeline import DataPipeline
from sales_analytics.schemas import SellerReport
from sales_analytics.strategies import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


class SellerReportPipeline(DataPipeline):
    def __init__(
        self,
        input_path: Optional[Path] = None,
        options: Optional[Mapping[str, Callable]] = None,
        test_mode: bool = False,
    ):
        super().__init__("seller", filename_base=settings.REPORT_FILENAME_BASE, test_mode=test_mode)
        self.input_path = Path(input_path) if input_path else None
        self.options = options if options is not None else DEFAULT_OPTIONS

    def extract(self) -> Optional[dict[str, Any]]:
        logger.info("--- Loading Sales Dataset ---")

        if self.input_path is not None:
            path = self.input_path
            if not path.exists():
                logger.error(f"  > ERROR: Dataset not found: {path}")
                return None
            file_date = utils.extract_file_date(path)
        else:
            found_info = utils.find_latest_report(settings.INPUT_DIR, settings.DATASET_FILENAME_PREFIX)
            if not found_info:
                logger.warning(
                    f"  > ⚠️  No '{settings.DATASET_FILENAME_PREFIX}*.json' file in {settings.INPUT_DIR}."
                )
                return None
            path, file_date = found_info

        logger.info(f"  > Found: {path.name} (File Date: {file_date})")

        data = utils.load_json(path)
        if data is None:
            return None

        self.status_summary[path.name] = file_date
        return data

    def transform(self, raw_data: dict[str, Any]) -> list[SellerReport] | None:
        logger.info("\n--- Aggregating Seller Statistics ---")

        try:
            reports = analyze(raw_data, self.options)
        except SalesAnalysisError as e:
            logger.error(f"❌ Cannot build seller report: {e}")
            return None

        summary_df = data_handler.reports_to_dataframe(reports)
        logger.info("\n--- Seller Ranking ---")
        logger.info(summary_df.to_string(index=False))

        totals = summary_df[["Revenue", "Profit", "Bonus"]].sum().round(2)
        logger.info(
            f"\nTotals: revenue={totals['Revenue']}, profit={totals['Profit']}, "
            f"bonus={totals['Bonus']}, sales={int(summary_df['Sales Count'].sum())}"
        )
        return reports
