import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Optional

from . import data_handler

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for report pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, filename_base: Optional[str] = None, test_mode: bool = False):
        self.report_type = report_type
        self.filename_base = filename_base or f"{report_type}_report"
        self.test_mode = test_mode
        # Status summary tracks the data date of each loaded source
        self.status_summary: dict[str, Optional[date]] = {}

    def run(self) -> Optional[list[Any]]:
        """
        Orchestrates the pipeline execution.
        Returns the transformed records, or None if nothing was produced.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if not raw_data:
            logger.warning(f"⚠️ No data extracted for {self.report_type}. Nothing to report.")
            return None

        # --- 2. TRANSFORM ---
        validated_data = self.transform(raw_data)
        if validated_data is None:
            logger.error(f"❌ Transformation failed for {self.report_type}.")
            return None

        # --- 3. LOAD ---
        self.load(validated_data)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return validated_data

    @abstractmethod
    def extract(self) -> Any:
        """
        Responsible for finding and reading the input, returning the raw data.
        Should also populate self.status_summary as it processes sources.
        """
        pass

    @abstractmethod
    def transform(self, raw_data: Any) -> list[Any] | None:
        """
        Responsible for turning raw data into validated report rows.
        Returns None when the data cannot be processed.
        """
        pass

    def load(self, validated_data: list[Any]):
        """
        Saves data to disk and posts to webhook.
        """
        # 1. Print Status Summary
        if self.status_summary:
            logger.info("\n--- Final Status Summary ---")
            for source, date_val in self.status_summary.items():
                logger.info(f"{source}: {date_val.isoformat() if date_val else 'No data'}")

        # 2. Save Outputs (CSV/JSON)
        if validated_data:
            data_handler.save_outputs(validated_data, self.filename_base)
        else:
            logger.warning("No data to save to disk.")

        # 3. Post to Webhook
        if not self.test_mode:
            data_handler.post_to_webhook(
                validated_data,
                metadata={
                    source: date_val.isoformat() if date_val else None
                    for source, date_val in self.status_summary.items()
                },
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
