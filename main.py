import argparse
import sys
from pathlib import Path

from sales_analytics import settings
from sales_analytics.logger import setup_logger
from sales_analytics.pipelines.seller_report import SellerReportPipeline


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the per-seller sales report.")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help=f"Dataset JSON file. Defaults to the latest '{settings.DATASET_FILENAME_PREFIX}*.json' in {settings.INPUT_DIR}.",
    )
    parser.add_argument("--test", action="store_true", help="Run without posting to the webhook.")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s).")
    return parser.parse_args(argv)


def run_process(argv=None) -> int:
    """Main orchestration function to run the entire reporting process."""
    args = parse_args(argv)
    logger = setup_logger(log_level=args.log_level.upper())

    logger.info("--- Starting Seller Report Process ---")
    pipeline = SellerReportPipeline(input_path=args.input, test_mode=args.test)
    reports = pipeline.run()

    if reports is None:
        logger.error("❌ No seller report was produced.")
        return 1

    logger.info("\n--- Process Finished Successfully ---")
    return 0


if __name__ == "__main__":
    sys.exit(run_process())
