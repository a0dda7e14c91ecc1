import json
import logging
import sys
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator

call_id_ctx: ContextVar[str | None] = ContextVar("call_id", default=None)

# Optional per-record fields passed through `extra=`
_EXTRA_FIELDS = ("attempt", "url", "status_code", "delay_ms")


class CallIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        cid = call_id_ctx.get()
        record.call_id = cid or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "call_id": getattr(record, "call_id", "-"),
        }
        for key in _EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                base[key] = value
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    level = logging.DEBUG if debug else logging.INFO
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(CallIdFilter())
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


@contextmanager
def call_context() -> Iterator[str]:
    """Bind a fresh call id for the duration of one logical request."""
    cid = uuid.uuid4().hex
    token = call_id_ctx.set(cid)
    logger = logging.getLogger("defillama_client.call")
    logger.debug("call start")
    try:
        yield cid
    finally:
        logger.debug("call end")
        call_id_ctx.reset(token)
