# storage.py
import os
import json
import logging
from datetime import datetime
from typing import List, Optional, Sequence

from pydantic import ValidationError
from sqlalchemy import (
    create_engine, MetaData, Table, Column,
    String, DateTime, Text
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import select, insert, update
from sqlalchemy.pool import NullPool

from config import STORAGE
from models import AssessmentInput, AssessmentRecord, build_record

logger = logging.getLogger(__name__)


def _get_db_url() -> str:
    url = os.getenv("DATABASE_URL", "").strip()
    if not url:
        try:
            import streamlit as st
            url = str(st.secrets.get("DATABASE_URL", "")).strip()
        except Exception:
            # no secrets.toml outside `streamlit run`
            pass
    return url


_engine = None


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        db_url = _get_db_url()
        if db_url:
            _engine = create_engine(db_url, pool_pre_ping=True, poolclass=NullPool)
        else:
            _engine = create_engine(STORAGE["default_db_url"], connect_args={"check_same_thread": False})
    return _engine


metadata = MetaData()

# One row per storage key; value is the whole JSON array (newest first)
kv_store = Table(
    "kv_store", metadata,
    Column("key", String(120), primary_key=True),
    Column("value", Text, nullable=False),
    Column("updated_at", DateTime, nullable=False),
)


def init_db(engine: Optional[Engine] = None) -> None:
    metadata.create_all(engine or get_engine())


class StorageError(Exception):
    """Stored payload can't be extended without losing what is already there."""


def dump_records(records: Sequence[AssessmentRecord]) -> str:
    return json.dumps([r.model_dump(mode="json") for r in records])


def parse_records(raw: Optional[str]) -> List[AssessmentRecord]:
    """Decode a stored JSON array. Never raises: bad data reads as no data."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Stored assessments are not valid JSON; treating as empty")
        return []
    if not isinstance(data, list):
        logger.warning("Stored assessments are not a JSON array (%s); treating as empty", type(data).__name__)
        return []

    records: List[AssessmentRecord] = []
    for i, item in enumerate(data):
        try:
            records.append(AssessmentRecord.model_validate(item))
        except ValidationError as exc:
            logger.warning("Skipping malformed assessment at index %d: %d error(s)", i, exc.error_count())
    return records


def parse_raw_items(raw: Optional[str]) -> list:
    """Decode a stored JSON array without validating entries. Raises StorageError on bad data."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise StorageError("Stored assessments are not valid JSON") from exc
    if not isinstance(data, list):
        raise StorageError(f"Stored assessments are not a JSON array ({type(data).__name__})")
    return data


class StorageBackend:
    """
    Holds the persisted assessment list under a single key.

    Subclasses only move the raw JSON text; encoding/decoding lives here so
    every backend reads and writes the same format. `load` is lenient and
    meant for display. `prepend` reads strictly: if the stored list can't be
    read back whole, the error propagates and nothing is written.
    """

    def __init__(self, key: str = STORAGE["key"]):
        self.key = key

    def _read_raw(self) -> Optional[str]:
        raise NotImplementedError

    def _write_raw(self, raw: str) -> None:
        raise NotImplementedError

    def load(self) -> List[AssessmentRecord]:
        try:
            raw = self._read_raw()
        except SQLAlchemyError:
            logger.exception("Could not read key %r; treating as empty", self.key)
            return []
        return parse_records(raw)

    def save(self, records: Sequence[AssessmentRecord]) -> int:
        self._write_raw(dump_records(records))
        return len(records)

    def prepend(self, record: AssessmentRecord) -> int:
        # entries that no longer validate are carried over untouched
        items = [record.model_dump(mode="json"), *parse_raw_items(self._read_raw())]
        self._write_raw(json.dumps(items))
        return len(items)


class MemoryBackend(StorageBackend):
    """In-process stand-in for tests and throwaway sessions."""

    def __init__(self, key: str = STORAGE["key"], raw: Optional[str] = None):
        super().__init__(key)
        self.raw = raw

    def _read_raw(self) -> Optional[str]:
        return self.raw

    def _write_raw(self, raw: str) -> None:
        self.raw = raw


class SqlBackend(StorageBackend):
    def __init__(self, key: str = STORAGE["key"], engine: Optional[Engine] = None):
        super().__init__(key)
        self.engine = engine or get_engine()
        init_db(self.engine)

    def _read_raw(self) -> Optional[str]:
        with self.engine.begin() as conn:
            row = conn.execute(
                select(kv_store.c.value).where(kv_store.c.key == self.key)
            ).fetchone()
        return row[0] if row else None

    def _write_raw(self, raw: str) -> None:
        now = datetime.now()
        with self.engine.begin() as conn:
            exists = conn.execute(
                select(kv_store.c.key).where(kv_store.c.key == self.key)
            ).fetchone()

            if exists:
                conn.execute(
                    update(kv_store).where(kv_store.c.key == self.key).values(value=raw, updated_at=now)
                )
            else:
                conn.execute(insert(kv_store).values(key=self.key, value=raw, updated_at=now))


class AssessmentLog:
    """Append-only, newest-first list of assessments on top of a backend."""

    def __init__(self, backend: Optional[StorageBackend] = None):
        self.backend = backend if backend is not None else SqlBackend()

    def records(self) -> List[AssessmentRecord]:
        return self.backend.load()

    def append(self, record: AssessmentRecord) -> int:
        """Store `record` first; backend read errors and StorageError propagate with nothing written."""
        count = self.backend.prepend(record)
        logger.info("Saved assessment %s (%s); %d on file", record.id, record.risk_zone.value, count)
        return count

    def submit(self, data: AssessmentInput) -> AssessmentRecord:
        record = build_record(data)
        self.append(record)
        return record
