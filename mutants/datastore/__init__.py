from __future__ import annotations

from .records import DnaRecord, DnaRecordStore, RecordStore

__all__ = ["DnaRecord", "DnaRecordStore", "RecordStore"]
