"""
Logging for the catalog API

Application logs go to stdout (and optionally a rotating file) as JSON or
plain text depending on LOG_FORMAT. Catalog writes are additionally
recorded on the non-propagating ``audit`` logger, one JSON object per event.

    logger = get_logger(__name__)
    logger.info("Material search", extra={"total": 12})

    audit_log("MATERIAL_CREATED", user_id="user-123", resource_type="material", resource_id=7)
"""
import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from plastics_catalog.core.settings import settings

MB = 1024 * 1024

# Attributes every LogRecord has; anything else came in through ``extra``
_STANDARD_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "taskName"}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _STANDARD_RECORD_ATTRS}


def _json_safe(value: Any) -> Any:
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


class JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, extras"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.levelno >= logging.ERROR:
            entry["location"] = f"{record.pathname}:{record.lineno} in {record.funcName}"
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update({k: _json_safe(v) for k, v in _extra_fields(record).items()})
        return json.dumps(entry)


class TextFormatter(logging.Formatter):
    """``2024-01-01 12:00:00 [INFO] plastics_catalog.main: Catalog API starting version=1.0.0``"""

    def format(self, record: logging.LogRecord) -> str:
        line = f"{datetime.now():%Y-%m-%d %H:%M:%S} [{record.levelname}] {record.name}: {record.getMessage()}"
        extras = _extra_fields(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class AuditFormatter(logging.Formatter):

    FIELDS = ("event", "user_id", "resource_type", "resource_id", "details", "ip_address")

    def format(self, record: logging.LogRecord) -> str:
        entry = {"timestamp": datetime.now(timezone.utc).isoformat()}
        for field in self.FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        entry.setdefault("event", record.getMessage())
        return json.dumps(entry, default=str)


def _rotating_file_handler(path: str, max_mb: int, backups: int) -> logging.Handler:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    return logging.handlers.RotatingFileHandler(path, maxBytes=max_mb * MB, backupCount=backups)


def setup_logging() -> None:
    """Configure the root and audit loggers from settings; call once at startup"""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter = JSONFormatter() if settings.LOG_FORMAT.lower() == "json" else TextFormatter()

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        handlers.append(_rotating_file_handler(settings.LOG_FILE, max_mb=10, backups=5))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        root.addHandler(handler)

    setup_audit_logging()

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def setup_audit_logging() -> None:
    audit_logger = logging.getLogger("audit")
    audit_logger.setLevel(logging.INFO)
    audit_logger.handlers.clear()
    audit_logger.propagate = False

    handlers = []
    if settings.AUDIT_LOG_FILE:
        handlers.append(_rotating_file_handler(settings.AUDIT_LOG_FILE, max_mb=50, backups=10))
    if settings.DEBUG:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(AuditFormatter())
        audit_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def audit_log(
    event: str,
    *,
    user_id: Optional[str] = None,
    resource_type: Optional[str] = None,
    resource_id: Optional[Any] = None,
    details: Optional[Dict[str, Any]] = None,
    ip_address: Optional[str] = None,
) -> None:
    """
    Record a catalog write.

    Args:
        event: e.g. "MATERIAL_CREATED", "FAVORITE_REMOVED"
        user_id: External id of the acting user
        resource_type: "material", "vendor", "material_vendor", "favorite" or "review"
        resource_id: Id of the affected row
        details: Event-specific data
        ip_address: Client address of the request
    """
    logging.getLogger("audit").info(
        event,
        extra={
            "event": event,
            "user_id": user_id,
            "resource_type": resource_type,
            "resource_id": resource_id,
            "details": details or {},
            "ip_address": ip_address,
        },
    )


def get_client_ip(request) -> Optional[str]:
    """Client address, preferring X-Forwarded-For then X-Real-IP"""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip
    return request.client.host if request.client else None
