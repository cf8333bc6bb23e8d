"""Structured JSON logging for batch runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from cashflow_risk.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root logging: JSON lines by default, plain text for terminals"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_batch_processed(
    source: str,
    total: int,
    counts: Dict[str, int],
    duration_ms: float,
) -> None:
    """Log structured batch outcome for analysis"""
    logging.getLogger("cashflow_risk.assessment").info(
        "Batch processed",
        extra={
            "step": "batch_processed",
            "source": source,
            "total": total,
            "decision_counts": counts,
            "duration_ms": duration_ms,
        },
    )
