"""Diagnostic analysis store.

Every successful gateway analysis is appended here. Nothing reads it back
over HTTP; it exists so a deployment can plug in real storage behind the
same two operations. The default keeps records in memory for the life of
the process.

Thread-safe via threading.Lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol

from shared.models import AnalysisRecord

logger = logging.getLogger(__name__)


class AnalysisStore(Protocol):
    def append(self, record: AnalysisRecord) -> None: ...

    def list(self) -> list[AnalysisRecord]: ...


class InMemoryAnalysisStore:
    """Append-only, process-lifetime list of analysis records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[AnalysisRecord] = []

    def append(self, record: AnalysisRecord) -> None:
        with self._lock:
            self._records.append(record)
            total = len(self._records)
        logger.debug(
            "Stored analysis: %d skills, %d missing (total records=%d)",
            len(record.required_skills), len(record.missing_skills), total,
        )

    def list(self) -> list[AnalysisRecord]:
        """Return a copy, oldest first."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


# ---------------------------------------------------------------------------
# Module-level singleton, injected into routes via Depends(get_analysis_store)
# ---------------------------------------------------------------------------

_store: Optional[InMemoryAnalysisStore] = None


def get_analysis_store() -> AnalysisStore:
    global _store
    if _store is None:
        _store = InMemoryAnalysisStore()
    return _store
