"""DocumentManager: the store and search evaluator behind one object"""

import logging
from typing import Callable

from docstore.core.search import search
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest


logger = logging.getLogger(__name__)


class DocumentManager:
    def __init__(self, repo: DocumentRepo = None, id_factory: Callable[[], str] = None):
        if repo is None:
            repo = MemoryRepo(id_factory=id_factory) if id_factory else MemoryRepo()
        self.repo = repo

    def save(self, document: Document) -> Document:
        """Upsert document, generating an id if it has none. created is left as supplied."""
        saved = self.repo.save(document)
        logger.debug("saved document %s", saved.id)
        return saved

    def find_by_id(self, doc_id: str) -> Document | None:
        return self.repo.find_by_id(doc_id)

    def search(self, request: SearchRequest = None) -> list[Document]:
        """Return documents matching every supplied filter in request."""
        results = search(self.repo, request)
        logger.debug("search matched %d document(s)", len(results))
        return results
