"""Root test configuration: shared document builders"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from docstore.models import Author, Document


@pytest.fixture(autouse=True)
def restore_docstore_logger():
    """Undo setup_logging so later tests still propagate records to caplog."""
    logger = logging.getLogger("docstore")
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    yield
    logger.setLevel(level)
    logger.handlers = handlers
    logger.propagate = propagate


@pytest.fixture(name="now")
def now_fixture():
    """A fixed aware timestamp for range tests."""
    return datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="make_doc")
def make_doc_fixture(now):
    """Factory for Documents with sensible defaults; pass None to clear a field."""
    def _make(
        title="Test Document",
        content="Test Content",
        author_id="author1",
        created_offset: int | None = 0,
        doc_id=None,
        ):
        return Document(
            id=doc_id,
            title=title,
            content=content,
            author=Author(id=author_id, name=f"Name of {author_id}") if author_id else None,
            created=now + timedelta(seconds=created_offset) if created_offset is not None else None,
        )
    return _make
