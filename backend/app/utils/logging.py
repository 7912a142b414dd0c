"""Structured logging for upstream calls."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at startup."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class StructuredUpstreamLogger:
    """Structured logger for upstream HTTP calls."""

    def log_call(
        self,
        source: str,
        url: str,
        outcome: str,
        latency_ms: float,
        status_code: int | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log one upstream call with structured data."""
        log_data: dict[str, Any] = {
            "source": source,
            "url": url,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if status_code is not None:
            log_data["status_code"] = status_code
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Upstream call: {source} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
