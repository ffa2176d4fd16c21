"""In-memory claim records for the development backend.

Records are kept as the raw JSON objects the real backend would send, naming
conventions and all, so the UI's normalizer is exercised end to end.
"""

from __future__ import annotations

import copy
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from loguru import logger

from claims_portal.core.lifecycle import can_cancel
from claims_portal.core.normalizer import resolve_field


class ClaimStoreError(Exception):
    """Base class for store failures surfaced as HTTP errors."""

    status_code = 400


class ClaimNotFoundError(ClaimStoreError):
    status_code = 404


class ClaimNotCancellableError(ClaimStoreError):
    status_code = 409


class ClaimStore:
    """Holds claim records keyed by their ``id``."""

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        for record in records or []:
            claim_id = resolve_field(record, "id")
            if claim_id is None:
                logger.warning("Skipping sample claim without an id")
                continue
            self._records[str(claim_id)] = copy.deepcopy(record)

    @classmethod
    def from_json(cls, path: str | Path) -> ClaimStore:
        """Load records from a JSON file holding a list or ``{"claims": [...]}``."""
        file = Path(path)
        if not file.exists():
            logger.warning("No sample claims at {path}, starting empty", path=file)
            return cls()

        data = json.loads(file.read_text(encoding="utf-8"))
        records = data.get("claims", []) if isinstance(data, dict) else data
        store = cls(records)
        logger.info("Loaded {n} sample claims from {path}", n=len(store), path=file)
        return store

    def __len__(self) -> int:
        return len(self._records)

    def records(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(record) for record in self._records.values()]

    def get(self, claim_id: str) -> dict[str, Any]:
        try:
            return copy.deepcopy(self._records[claim_id])
        except KeyError:
            raise ClaimNotFoundError(f"Claim {claim_id} not found") from None

    def cancel(self, claim_id: str, *, comments: str, cancelled_by: str) -> dict[str, Any]:
        """Move a claim to ``Cancelled`` and return the updated record."""
        if claim_id not in self._records:
            raise ClaimNotFoundError(f"Claim {claim_id} not found")

        record = self._records[claim_id]
        status = resolve_field(record, "status")
        if not can_cancel(status):
            raise ClaimNotCancellableError(f"Claim {claim_id} cannot be cancelled in status '{status}'")

        record["status"] = "Cancelled"
        record["cancellation"] = {
            "comments": comments,
            "cancelledBy": cancelled_by,
            "cancelledAt": datetime.now(timezone.utc).isoformat(),
        }
        logger.info("Claim {id} cancelled by {actor}", id=claim_id, actor=cancelled_by)
        return copy.deepcopy(record)
