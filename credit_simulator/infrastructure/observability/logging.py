"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from credit_simulator.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_simulation(
    request_id: str,
    tax_id: str,
    plan_kind: str,
    loan_amount: float,
    is_viable: bool,
    duration_ms: float,
) -> None:
    """Log structured simulation outcome for analysis"""
    logging.info(
        "Simulation completed",
        extra={
            "request_id": request_id,
            "tax_id": tax_id,
            "step": "simulation_complete",
            "plan_kind": plan_kind,
            "loan_amount": loan_amount,
            "viability_outcome": "approved" if is_viable else "rejected",
            "duration_ms": duration_ms,
        },
    )


def log_ingestion(request_id: str, accepted: int, skipped: int, duplicates: int) -> None:
    """Log roster ingestion counts"""
    logging.info(
        "Roster ingested",
        extra={
            "request_id": request_id,
            "step": "roster_ingested",
            "accepted_rows": accepted,
            "skipped_rows": skipped,
            "duplicate_rows": duplicates,
        },
    )
