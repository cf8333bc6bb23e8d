"""CSV ingestion - parse, normalize columns and validate customer rows"""

import logging
import re
from dataclasses import dataclass
from typing import IO, Dict, List, Union
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from cashflow_risk.domain.exceptions import EmptyDatasetError, InvalidRecordError, MissingColumnsError
from cashflow_risk.domain.models import Criterion, CustomerRecord
from cashflow_risk.ingestion.schemas import CustomerRecordIn

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["customer_id"] + [c.value for c in Criterion]


@dataclass
class IngestionResult:
    """Valid records in file order plus how many rows were skipped"""

    records: List[CustomerRecord]
    invalid_count: int


def normalize_column(name: str) -> str:
    """' Transaction  History ' -> 'transaction_history'"""
    return re.sub(r"\s+", "_", str(name).strip().lower())


def _resolve_columns(columns: List[str]) -> Dict[str, str]:
    """
    Map each required column to the source column that provides it.

    A source column matches on its normalized name, or with underscores
    dropped on both sides (CustomerID, TransactionHistory).
    """
    resolved = {}
    for required in REQUIRED_COLUMNS:
        squashed = required.replace("_", "")
        for column in columns:
            normalized = normalize_column(column)
            if normalized == required or normalized.replace("_", "") == squashed:
                resolved[required] = column
                break
    return resolved


def parse_row(row: Dict[str, str]) -> CustomerRecord:
    """Validate one row keyed by required column names"""
    try:
        return CustomerRecordIn(**row).to_domain()
    except ValidationError as e:
        raise InvalidRecordError(str(e)) from e


def load_customers_csv(source: Union[str, Path, IO[str]]) -> IngestionResult:
    """
    Read customer rows from CSV.

    Raises:
        MissingColumnsError: a required column cannot be found
        EmptyDatasetError: the file holds no valid rows
    """
    try:
        frame = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as e:
        raise EmptyDatasetError("No valid data found in file") from e

    resolved = _resolve_columns(list(frame.columns))
    missing = [c for c in REQUIRED_COLUMNS if c not in resolved]
    if missing:
        raise MissingColumnsError(missing)

    frame = frame[[resolved[c] for c in REQUIRED_COLUMNS]]
    frame.columns = REQUIRED_COLUMNS

    records = []
    invalid_count = 0
    for index, row in enumerate(frame.to_dict(orient="records")):
        try:
            records.append(parse_row(row))
        except InvalidRecordError as e:
            invalid_count += 1
            logger.debug("Skipping invalid row", extra={"row": index + 1, "error": str(e)})

    if not records:
        raise EmptyDatasetError("No valid data found in file")

    logger.info(
        "Ingestion complete",
        extra={"step": "ingestion_complete", "valid": len(records), "invalid": invalid_count},
    )
    return IngestionResult(records=records, invalid_count=invalid_count)
