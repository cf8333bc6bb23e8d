"""CSV export of processed records"""

import csv
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

from cashflow_risk.domain.exceptions import EmptyDatasetError
from cashflow_risk.domain.models import ProcessedRecord

EXPORT_COLUMNS = [
    ("Customer ID", "customer_id"),
    ("Transaction History", "transaction_history"),
    ("Affordability", "affordability"),
    ("Employment", "employment"),
    ("Behavior", "behavior"),
    ("Combined Score", "combined_score"),
    ("Risk Level", "risk_level"),
    ("Decision", "decision"),
]


def _format_cell(value) -> str:
    if hasattr(value, "value"):  # enums export their display label
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_frame(records: Sequence[ProcessedRecord]) -> pd.DataFrame:
    rows = [[_format_cell(getattr(r, attr)) for _, attr in EXPORT_COLUMNS] for r in records]
    return pd.DataFrame(rows, columns=[header for header, _ in EXPORT_COLUMNS])


def to_csv(records: Sequence[ProcessedRecord]) -> str:
    """Every cell quoted, header first, newline separated"""
    if not records:
        raise EmptyDatasetError("No data to export")
    return to_frame(records).to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")


def export_filename(day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"risk-assessment-export-{day.isoformat()}.csv"


def write_csv(records: Sequence[ProcessedRecord], path: Union[str, Path]) -> Path:
    """Write the export to `path`; a directory gets the dated default filename"""
    path = Path(path)
    if path.is_dir():
        path = path / export_filename()
    path.write_text(to_csv(records), encoding="utf-8")
    return path
