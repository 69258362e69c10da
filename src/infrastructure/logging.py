"""
Logging configuration.

structlog on top of stdlib logging:
- JSON output to stdout (CloudWatch Logs)
- request_id bound per invocation via contextvars
"""

import logging
import sys
from typing import Any
from uuid import uuid4

import structlog

_configured = False


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging once per execution context.

    Args:
        service_name: Name of the service for log context
        level: Minimum log level name
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    # Lambda ランタイムは root に handler を設定済みのため basicConfig は効かない
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(default=str),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    _configured = True


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def bind_request_context(event: dict[str, Any] | None, context: Any) -> str:
    """
    Reset contextvars and bind the request ID for this invocation.

    Lambda's aws_request_id wins, then API Gateway's requestContext.requestId,
    then a fresh UUID.
    """
    request_id = getattr(context, "aws_request_id", None)
    if not request_id and isinstance(event, dict):
        request_id = (event.get("requestContext") or {}).get("requestId")
    request_id = request_id or str(uuid4())

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)
    return request_id
