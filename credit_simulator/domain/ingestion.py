"""Roster ingestion - normalizes raw tabular rows into counterpart profiles"""

import logging
import math
import re
from numbers import Real
from typing import Any, List, Sequence
from credit_simulator.domain.models import Counterpart, IngestionReport
from credit_simulator.domain.exceptions import MalformedRecordError

ROSTER_DELIMITER = ";"
REQUIRED_FIELDS = 3

# Normalized billing text: optional sign, digits, optional decimal part
AMOUNT_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def parse_billing_amount(value: Any) -> float:
    """
    Normalize a billing cell to a float.

    Text uses "." as thousands separator and "," as decimal separator:
        "1.234.567,89" -> 1234567.89
    Numeric cells (already decoded by a spreadsheet reader) are used directly.

    Raises:
        MalformedRecordError: Empty, non-numeric or non-finite amount
    """
    if isinstance(value, bool):
        raise MalformedRecordError(f"Billing amount is not numeric: {value!r}")

    if isinstance(value, Real):
        amount = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(".", "").replace(",", ".", 1)
        if not AMOUNT_PATTERN.fullmatch(text):
            raise MalformedRecordError(f"Unparsable billing amount: {value!r}")
        try:
            amount = float(text)
        except ValueError as e:
            raise MalformedRecordError(f"Unparsable billing amount: {value!r}") from e
    else:
        raise MalformedRecordError(f"Billing amount is not numeric: {value!r}")

    if not math.isfinite(amount):
        raise MalformedRecordError(f"Billing amount is not finite: {value!r}")

    return amount


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    # Spreadsheet readers decode tax ids as floats (30111222333.0)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_counterpart_row(row: Sequence[Any]) -> Counterpart:
    """
    Build a Counterpart from a `name;taxId;billing` row.

    Extra cells beyond the third are ignored. The tax id doubles as identity.

    Raises:
        MalformedRecordError: Missing fields, blank name/tax id, bad billing
    """
    if isinstance(row, str) or len(row) < REQUIRED_FIELDS:
        raise MalformedRecordError(f"Expected at least {REQUIRED_FIELDS} fields, got {row!r}")

    name = _cell_text(row[0])
    tax_id = _cell_text(row[1])
    if not name or not tax_id:
        raise MalformedRecordError(f"Blank name or tax id in row {row!r}")

    annual_billing = parse_billing_amount(row[2])

    return Counterpart(id=tax_id, name=name, tax_id=tax_id, annual_billing=annual_billing)


def ingest_report(rows: Sequence[Sequence[Any]]) -> IngestionReport:
    """
    Parse a batch of roster rows, skipping malformed ones.

    Requirements:
    - One bad row never aborts the batch
    - Output keeps input order
    - Duplicate tax ids: first occurrence wins, later rows are skipped
    """
    counterparts: List[Counterpart] = []
    seen_tax_ids = set()
    duplicates: List[str] = []
    skipped = 0

    for index, row in enumerate(rows):
        try:
            counterpart = parse_counterpart_row(row)
        except MalformedRecordError as e:
            skipped += 1
            logging.debug(f"Skipping roster row {index}: {e}")
            continue

        if counterpart.tax_id in seen_tax_ids:
            duplicates.append(counterpart.tax_id)
            logging.warning(
                "Duplicate tax id in roster, keeping first occurrence",
                extra={"row_index": index, "tax_id": counterpart.tax_id},
            )
            continue

        seen_tax_ids.add(counterpart.tax_id)
        counterparts.append(counterpart)

    return IngestionReport(
        counterparts=tuple(counterparts),
        skipped_rows=skipped,
        duplicate_tax_ids=tuple(duplicates),
    )


def ingest(rows: Sequence[Sequence[Any]]) -> List[Counterpart]:
    """Main entry point: rows in, counterparts with derived credit ceiling out"""
    return list(ingest_report(rows).counterparts)


def split_roster_text(text: str, delimiter: str = ROSTER_DELIMITER) -> List[List[str]]:
    """Split pasted roster text into rows of cells, ignoring blank lines"""
    return [line.strip().split(delimiter) for line in text.strip().splitlines() if line.strip()]


def search_counterparts(
    counterparts: Sequence[Counterpart],
    term: str,
    limit: int | None = None,
) -> List[Counterpart]:
    """Filter by case-insensitive name match or tax id substring"""
    needle = term.strip().lower()
    if not needle:
        matches = list(counterparts)
    else:
        matches = [c for c in counterparts if needle in c.name.lower() or needle in c.tax_id]

    return matches[:limit] if limit is not None else matches
