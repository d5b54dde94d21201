"""Collection Route Helpers: operation timing/logging and shared dependencies.

Invariants:
    - track_operation logs "[API] <operation>: <ms>ms, <n> items" on success
    - Catalog errors pass through with operation + elapsed time attached to their context
    - Any other exception becomes StorageError(failure_message), cause kept in debug_info
    - Failures are logged once, by the global error handler

Design Decisions:
    - Sync context manager around awaited calls: no await needed to time or map errors
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from fastapi import Request

from catalog.core.errors import CatalogError, StorageError, ErrorContext
from catalog.services.seed_catalog import SeedCatalog

logger = logging.getLogger(__name__)


@dataclass
class OperationTracker:
    """Timing and record count for a single handler invocation."""
    operation: str
    record_count: int | None = None
    started_at: float = field(default_factory=time.perf_counter)

    @property
    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self.started_at) * 1000, 2)


@contextmanager
def track_operation(
    operation: str, failure_message: str,
) -> Iterator[OperationTracker]:
    tracker = OperationTracker(operation)
    try:
        yield tracker
    except CatalogError as exc:
        exc.context.operation = exc.context.operation or operation
        exc.context.elapsed_ms = tracker.elapsed_ms
        exc.context.record_count = tracker.record_count
        raise
    except Exception as exc:
        raise StorageError(
            failure_message, operation,
            ErrorContext(
                elapsed_ms=tracker.elapsed_ms,
                record_count=tracker.record_count,
                debug_info={"cause": str(exc)},
            ),
        ) from exc
    logger.info(
        f"[API] {operation}: {tracker.elapsed_ms}ms, {tracker.record_count} items",
        extra={
            "operation": operation,
            "elapsed_ms": tracker.elapsed_ms,
            "record_count": tracker.record_count,
        },
    )


def get_seed_catalog(request: Request) -> SeedCatalog:
    """FastAPI dependency for the seed catalog loaded by create_app()."""
    return request.app.state.seeds
