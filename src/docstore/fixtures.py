"""Load documents from a YAML fixture file into a repository"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.crud.repo import DocumentRepo
from docstore.models import Document


logger = logging.getLogger(__name__)


def parse_documents(text: str) -> list[Document]:
    """Parse a YAML list of document mappings.

    Raises ValueError on invalid YAML, a non-list top level, or an invalid record.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError("Expected a list of documents")

    docs = []
    for i, item in enumerate(raw):
        try:
            doc = Document.model_validate(item)
        except ValidationError as e:
            raise ValueError(f"Invalid document at index {i}: {e}") from e
        docs.append(doc)
    return docs


def load_documents(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every document in the fixture file at path into repo. Returns the saved documents."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    try:
        docs = parse_documents(text)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e
    saved = [repo.save(doc) for doc in docs]
    logger.info("loaded %d document(s) from %s", len(saved), path)
    return saved
