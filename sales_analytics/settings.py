import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Filename Configuration ---
DATASET_FILENAME_PREFIX = os.getenv("DATASET_FILENAME_PREFIX", "sales_data_")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME_BASE", "seller_report")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() in ("true", "1", "yes")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")
WEBHOOK_TIMEOUT = int(os.getenv("WEBHOOK_TIMEOUT", "15"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Shared Business Logic ---
# How many best-selling products are kept per seller in the final report.
TOP_PRODUCTS_LIMIT = int(os.getenv("TOP_PRODUCTS_LIMIT", "10"))

# Bonus tiers by 0-based profit rank. Last place gets nothing,
# everyone else falls back to DEFAULT_BONUS_RATE.
BONUS_RATES_BY_RANK = {
    0: 0.15,
    1: 0.10,
    2: 0.10,
}
DEFAULT_BONUS_RATE = 0.05

# Used when a seller has neither a first nor a last name.
UNKNOWN_SELLER_NAME = "Unknown"
