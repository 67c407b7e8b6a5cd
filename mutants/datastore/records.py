from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from ..errors import StoreError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DnaRecord:
    dna_hash: str
    is_mutant: bool
    created_at: datetime

    @classmethod
    def create(cls, dna_hash: str, is_mutant: bool) -> DnaRecord:
        return cls(
            dna_hash=dna_hash,
            is_mutant=is_mutant,
            created_at=datetime.now(timezone.utc),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "dna_hash": self.dna_hash,
            "is_mutant": self.is_mutant,
            "created_at": self.created_at.astimezone(timezone.utc).isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DnaRecord:
        dna_hash = data["dna_hash"]
        if not isinstance(dna_hash, str) or not dna_hash:
            raise TypeError("dna_hash must be a non-empty string")
        is_mutant = data["is_mutant"]
        if not isinstance(is_mutant, bool):
            raise TypeError(f"is_mutant must be a bool, got {type(is_mutant).__name__}")
        created_at = datetime.fromisoformat(str(data["created_at"]))
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(dna_hash=dna_hash, is_mutant=is_mutant, created_at=created_at)


class RecordStore(Protocol):
    def find_by_hash(self, dna_hash: str) -> Optional[DnaRecord]: ...

    def insert_if_absent(self, record: DnaRecord) -> DnaRecord: ...

    def count_by_is_mutant(self, is_mutant: bool) -> int: ...


class DnaRecordStore:
    """Content-addressed store of classification results.

    Records are keyed by DNA hash, so each hash maps to at most one record.
    With a ``path`` every record is appended to a JSON-lines journal and
    fsynced before it becomes visible; the journal is replayed on open.
    Without one the store lives in memory only. Per-outcome counters are
    kept alongside the records so mutant and human totals are available
    without a scan.

    Two locks are held: ``_write_lock`` serializes inserts and the journal
    append, ``_lock`` guards the in-memory maps. Lookups only take ``_lock``
    and never wait on disk I/O.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._records: Dict[str, DnaRecord] = {}
        self._counts: Dict[bool, int] = {True: 0, False: 0}
        if self._path is not None:
            self._load()

    @property
    def path(self) -> Path | None:
        return self._path

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _load(self) -> None:
        if self._path is None or not self._path.exists():
            return
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise StoreError(f"Failed to read DNA records from {self._path}: {exc}") from exc

        *lines, tail = raw.split(b"\n")
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                record = DnaRecord.from_dict(json.loads(line))
            except (KeyError, ValueError, TypeError) as exc:
                raise StoreError(
                    f"Malformed DNA record on line {line_number} of {self._path}: {exc}"
                ) from exc
            if record.dna_hash in self._records:
                continue
            self._records[record.dna_hash] = record
            self._counts[record.is_mutant] += 1
        if tail.strip():
            # Unterminated last line: an append that never completed.
            logger.warning(
                "Discarding incomplete DNA record at end of %s (line %d)",
                self._path,
                len(lines) + 1,
            )
            self._truncate(len(raw) - len(tail))
        logger.info("Loaded %d DNA records from %s", len(self._records), self._path)

    def _truncate(self, size: int) -> None:
        try:
            os.truncate(self._path, size)
        except OSError as exc:
            raise StoreError(f"Failed to repair DNA record file {self._path}: {exc}") from exc

    def _append(self, record: DnaRecord) -> None:
        line = (json.dumps(record.to_dict(), sort_keys=True) + "\n").encode("utf-8")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("ab") as handle:
                start = handle.tell()
                try:
                    handle.write(line)
                    handle.flush()
                    os.fsync(handle.fileno())
                except OSError:
                    handle.truncate(start)
                    raise
        except OSError as exc:
            raise StoreError(f"Failed to write DNA record to {self._path}: {exc}") from exc

    def find_by_hash(self, dna_hash: str) -> Optional[DnaRecord]:
        with self._lock:
            return self._records.get(dna_hash)

    def insert_if_absent(self, record: DnaRecord) -> DnaRecord:
        """Insert ``record`` unless its hash is already stored.

        Returns the stored record, which is the existing one when another
        caller got there first. Raises ``StoreError`` when the journal write
        fails; the record is then not stored.
        """
        with self._write_lock:
            existing = self.find_by_hash(record.dna_hash)
            if existing is not None:
                logger.debug("DNA record already present hash=%s", record.dna_hash[:12])
                return existing
            if self._path is not None:
                self._append(record)
            with self._lock:
                self._records[record.dna_hash] = record
                self._counts[record.is_mutant] += 1
            return record

    def count_by_is_mutant(self, is_mutant: bool) -> int:
        with self._lock:
            return self._counts[bool(is_mutant)]


__all__ = ["DnaRecord", "DnaRecordStore", "RecordStore"]
