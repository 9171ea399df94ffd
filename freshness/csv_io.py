"""CSV export and import of scored samples.

Format: the first line holds the field names of the first sample in
insertion order; each following line holds one sample's values joined by the
delimiter. Values are never quoted, so a delimiter inside a value (for
example in ``fishName``) is not supported.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from core.exceptions import CsvFormatError
from freshness.models import PARAMETER_FIELDS, FishParameter, FishSample
from freshness.scorer import calculate_freshness

# Columns that stay text even when they look numeric.
TEXT_COLUMNS = frozenset({"id", "fishName", "Kategori"})


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def generate_csv(samples: Sequence[FishSample], delimiter: str = ",") -> str:
    """Serialize samples; an empty sequence gives an empty string."""
    if not samples:
        return ""

    headers = list(samples[0].to_dict().keys())
    lines = [delimiter.join(headers)]
    for sample in samples:
        data = sample.to_dict()
        lines.append(delimiter.join(_format_value(data.get(header)) for header in headers))
    return "\n".join(lines)


def _coerce(value: str) -> Any:
    """Turn numeric-looking text into int or float; empty text into None."""
    value = value.strip()
    if value == "":
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        number = float(value)
    except ValueError:
        return value
    if not math.isfinite(number):
        return value
    return int(number) if number.is_integer() else number


def _parameter_value(row: Dict[str, Any], name: str, line_number: int) -> Optional[float]:
    value = row.get(name)
    if value is None or isinstance(value, (int, float)):
        return value
    logger.warning(f"Line {line_number}: non-numeric {name} value {value!r} treated as unset")
    return None


def parse_csv_file(text: str, delimiter: str = ",", strict: bool = False) -> List[FishSample]:
    """Parse CSV text produced by ``generate_csv`` (or typed by hand).

    Skor and Kategori are always recomputed from the parameter columns. The
    ``id``, ``timestamp`` and ``fishName`` columns are kept when present and
    generated when absent.

    Args:
        text: CSV content
        delimiter: Field separator
        strict: Raise on malformed input instead of skipping it

    Returns:
        One FishSample per well-formed data line

    Raises:
        CsvFormatError: In strict mode, for a missing parameter column or a
            line whose value count differs from the header's; ``line_number``
            is the physical line in ``text``
    """
    # Excel prefixes UTF-8 CSV files with a byte order mark
    lines = [
        (number, line)
        for number, line in enumerate(text.lstrip("\ufeff").splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        return []

    header_line, header_text = lines[0]
    headers = [header.strip() for header in header_text.split(delimiter)]
    missing = [name for name in PARAMETER_FIELDS if name not in headers]
    if missing:
        message = f"Missing parameter column(s): {', '.join(missing)}"
        if strict:
            raise CsvFormatError(message, line_number=header_line)
        logger.warning(f"{message}; treating them as unset")

    samples: List[FishSample] = []
    for line_number, line in lines[1:]:
        values = line.split(delimiter)
        if len(values) != len(headers):
            message = f"Line {line_number}: expected {len(headers)} values, got {len(values)}"
            if strict:
                raise CsvFormatError(message, line_number=line_number)
            logger.warning(f"{message}; line skipped")
            continue

        row: Dict[str, Any] = {}
        for header, raw in zip(headers, values):
            row[header] = raw.strip() if header in TEXT_COLUMNS else _coerce(raw)

        params = FishParameter(
            **{name.lower(): _parameter_value(row, name, line_number) for name in PARAMETER_FIELDS}
        )
        timestamp = row.get("timestamp")
        sample = calculate_freshness(
            params,
            fish_name=row.get("fishName") or None,
            sample_id=row.get("id") or None,
            timestamp=int(timestamp) if isinstance(timestamp, (int, float)) else None,
        )

        stored = row.get("Skor")
        if isinstance(stored, (int, float)) and stored != sample.skor:
            logger.debug(f"Line {line_number}: stored Skor {stored} replaced by {sample.skor}")
        samples.append(sample)

    logger.info(f"Parsed {len(samples)} sample(s) from CSV")
    return samples
