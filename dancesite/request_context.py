from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar, Token
from typing import Optional

TRACE_ID_HEADER = "X-Trace-Id"
INCOMING_REQUEST_ID_HEADER = "X-Request-ID"

_trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")


def new_trace_id() -> str:
    return uuid.uuid4().hex


def set_trace_id(trace_id: Optional[str]) -> Token[str]:
    return _trace_id_var.set(trace_id or "")


def reset_trace_id(token: Token[str]) -> None:
    _trace_id_var.reset(token)


def get_trace_id(default: str = "no-request") -> str:
    value = _trace_id_var.get()
    return value if value else default


class TraceIdFilter(logging.Filter):
    """Attach the current request's trace id to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        # An explicit extra={"trace_id": ...} wins over the context
        if not getattr(record, "trace_id", None):
            record.trace_id = get_trace_id("-")
        return True
