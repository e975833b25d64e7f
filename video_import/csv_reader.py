"""CSV input loading"""

import csv
import logging
from pathlib import Path
from typing import List

from .models import InputRow

logger = logging.getLogger(__name__)


class CsvReadError(Exception):
    pass


def load_rows(file_path: str, url_column: str = 'youtubeUrl') -> List[InputRow]:
    """
    Read video rows from a CSV file with a header row.

    Args:
        file_path: Path to the CSV file
        url_column: Header of the column holding the video URL

    Returns:
        One InputRow per data row with a non-empty URL, in file order
    """
    path = Path(file_path)
    if not path.exists():
        raise CsvReadError(f"Input file '{file_path}' not found")

    rows = []
    try:
        with open(path, 'r', encoding='utf-8-sig', newline='') as f:
            reader = csv.DictReader(f)
            if not reader.fieldnames or url_column not in reader.fieldnames:
                raise CsvReadError(
                    f"Column '{url_column}' not found in {file_path} (columns: {reader.fieldnames})"
                )

            for line_num, row in enumerate(reader, 1):
                url = (row.get(url_column) or '').strip()
                if not url:
                    logger.warning(f"Row {line_num}: empty {url_column}, skipping")
                    continue
                rows.append(InputRow(source_url=url, line_number=line_num))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise CsvReadError(f"Could not read {file_path}: {e}") from e

    logger.info(f"📋 Loaded {len(rows)} videos from {file_path}")
    return rows
