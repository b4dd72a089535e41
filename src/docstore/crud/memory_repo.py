from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable

from docstore.core.ids import new_id
from docstore.crud.repo import DocumentRepo
from docstore.models import Document

@dataclass
class MemoryRepo(DocumentRepo):
    id_factory: Callable[[], str] = new_id
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, doc: Document) -> Document:
        if not doc.id:
            doc.id = self.id_factory()
        self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def all(self) -> list[Document]:
        return list(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs
