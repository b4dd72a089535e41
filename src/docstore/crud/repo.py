from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.models import Document

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Insert or overwrite by id, assigning one when missing. Returns the same instance."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def all(self) -> list[Document]:
        """Snapshot of every stored document."""
        raise NotImplementedError
