from __future__ import annotations

import contextlib
import contextvars
from typing import Any, Dict, Iterator

# Fields stamped on every record (summoner, match_id). Each asyncio task
# runs in a copy of the context, so one worker's match_id never leaks into
# another's records.
_fields: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_fields", default={})


def get_context() -> Dict[str, Any]:
    return dict(_fields.get())


@contextlib.contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Add ``values`` (``None`` ones skipped) to the fields of every record logged in the block."""
    merged = {**_fields.get(), **{k: v for k, v in values.items() if v is not None}}
    token = _fields.set(merged)
    try:
        yield merged
    finally:
        _fields.reset(token)
