from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

# Each asyncio task gets a copy of this at creation, so a job's binding
# never leaks into a sibling job running on the same loop.
_fields: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_fields", default={})


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(_fields.get())
    merged.update((k, v) for k, v in values.items() if v is not None)
    return merged


def get_context() -> Dict[str, Any]:
    """Copy of the fields bound to the current task."""
    return dict(_fields.get())


@contextmanager
def context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Scoped binding, e.g. ``with context(job_id=job_id): ...``."""
    fields = _merged(values)
    token = _fields.set(fields)
    try:
        yield fields
    finally:
        _fields.reset(token)
