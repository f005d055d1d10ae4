# ABOUTME: Shared pytest fixtures for cnemeta tests.
# ABOUTME: Provides an in-memory record accessor, a temporary record store, and sample extra text.

from collections.abc import Iterator
from pathlib import Path

import pytest

from cnemeta.db.connection import open_store
from cnemeta.db.records import RecordStore
from fakes import FakeRecord

SAMPLE_EXTRA = (
    "OCLC: 123456\n"
    "cne-original-language: zh-TW\n"
    "cne-title-original: 清代以來三峽地區水旱災害的初步研究\n"
    "cne-title-romanized: Qingdai yilai Sanxia diqu shuihan zaihai de chubu yanjiu\n"
    "cne-title-english: A Preliminary Study of Floods and Droughts in the Three Gorges Region\n"
    "cne-journal-original: 中國農史\n"
    "cne-creator-0-last-original: 華\n"
    "cne-creator-0-first-original: 林甫\n"
    "cne-creator-0-last-romanized: Hua\n"
    "cne-creator-0-first-romanized: Linfu\n"
    "tex.note: keep me\n"
)


@pytest.fixture
def sample_extra() -> str:
    """Extra field mixing foreign lines with recognized metadata lines."""
    return SAMPLE_EXTRA


@pytest.fixture
def fake_record() -> FakeRecord:
    """A FakeRecord pre-filled with the sample extra text."""
    return FakeRecord(SAMPLE_EXTRA)


@pytest.fixture
def empty_record() -> FakeRecord:
    return FakeRecord()


@pytest.fixture
def store(tmp_path: Path) -> Iterator[RecordStore]:
    """A RecordStore backed by a temporary database."""
    conn = open_store(tmp_path / "records.db")
    yield RecordStore(conn)
    conn.close()
