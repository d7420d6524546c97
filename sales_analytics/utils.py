import json
import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Dataset files are expected to carry their date, e.g. 'sales_data_2025-12-19.json'.
FILENAME_DATE_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})")


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def extract_file_date(file_path: Path) -> date:
    """
    Date of a dataset file: the YYYY-MM-DD stamp in its name when present,
    otherwise the file's last modification date.
    """
    match = FILENAME_DATE_PATTERN.search(file_path.name)
    if match:
        try:
            return datetime.strptime(match.group(1), "%Y-%m-%d").date()
        except ValueError:
            logger.warning(f"Ignoring invalid date stamp in {file_path.name}.")
    return datetime.fromtimestamp(file_path.stat().st_mtime).date()


def find_latest_report(directory: Path, prefix: str, suffix: str = ".json") -> Optional[tuple[Path, date]]:
    """
    Finds the most recent file in `directory` whose name starts with `prefix`.
    Returns (path, file_date), or None if no file matches.
    """
    if not directory.exists():
        return None

    candidates = [
        (path, extract_file_date(path))
        for path in directory.glob(f"{prefix}*{suffix}")
        if path.is_file()
    ]
    if not candidates:
        return None

    # Latest date wins; ties are broken by the newest modification time.
    return max(candidates, key=lambda c: (c[1], c[0].stat().st_mtime))


def load_json(file_path: Path) -> Optional[dict[str, Any]]:
    """
    Loads a JSON dataset with an encoding fallback:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte sequence.
    Returns None if the file is missing or is not valid JSON.
    """
    try:
        with open(file_path, encoding="utf-8-sig") as f:
            return json.load(f)

    except UnicodeDecodeError:
        logger.info(f"INFO: UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'.")
        try:
            with open(file_path, encoding="latin-1") as f:
                return json.load(f)
        except json.JSONDecodeError as e_latin1:
            logger.error(f"ERROR: Could not parse {file_path.name} even with latin-1. Reason: {e_latin1}")
            return None

    except FileNotFoundError:
        logger.info(f"INFO: Dataset not found at {file_path}, skipping.")
        return None

    except json.JSONDecodeError as e_json:
        logger.error(f"ERROR: {file_path.name} is not valid JSON. Reason: {e_json}")
        return None
