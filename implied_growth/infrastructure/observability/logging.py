"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from implied_growth.config import settings


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping each record with UTC time and the deployment it came from"""

    def __init__(self, *args, service_name: Optional[str] = None, model_variant: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service_name = service_name or settings.service_name
        self.model_variant = model_variant or settings.model_variant.value

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name
        # Records that name their own variant keep it
        log_record.setdefault("variant", self.model_variant)


def setup_logging(level: Optional[str] = None, stream=None) -> logging.Handler:
    """
    Route the root logger to one JSON handler.

    Level and service identity default to the loaded settings.
    """
    root = logging.getLogger()
    root.setLevel(level or settings.log_level)

    # Replaces handlers from earlier calls instead of stacking them
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)
    return handler


def log_calculation(
    request_id: str,
    variant: str,
    is_valid: bool,
    implied_growth: float,
    duration_ms: float,
) -> None:
    """Log structured calculation outcome for analysis"""
    logging.info(
        "Calculation completed",
        extra={
            "request_id": request_id,
            "step": "calculation_complete",
            "variant": variant,
            "outcome": "valid" if is_valid else "invalid",
            "implied_growth_percent": round(implied_growth, 4),
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, errors: Dict[str, str]) -> None:
    """Log inputs that were blocked before reaching the engine"""
    logging.warning(
        "Calculation rejected",
        extra={
            "request_id": request_id,
            "step": "validation",
            "error_fields": sorted(errors),
        },
    )
