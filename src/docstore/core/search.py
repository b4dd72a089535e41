"""Search predicates: per-dimension document filters and their conjunction"""

from datetime import datetime

from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest


def matches_title_prefixes(doc: Document, prefixes: list[str] | None) -> bool:
    """True if no prefixes are given or the title starts with any of them."""
    if not prefixes:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def matches_contains_contents(doc: Document, contents: list[str] | None) -> bool:
    """True if no substrings are given or the content contains any of them."""
    if not contents:
        return True
    return doc.content is not None and any(c in doc.content for c in contents)


def matches_author_ids(doc: Document, author_ids: list[str | None] | None) -> bool:
    """True if no author ids are given or the document's author id is among them.

    A document without an author has an effective author id of None, which is
    checked for membership like any other value.
    """
    if not author_ids:
        return True
    author_id = doc.author.id if doc.author is not None else None
    return author_id in author_ids


def matches_created_range(
    doc: Document,
    created_from: datetime | None,
    created_to: datetime | None,
    ) -> bool:
    """True if created falls within the inclusive [created_from, created_to] window.

    Each supplied bound requires a non-null created timestamp.
    """
    created = doc.created
    if created_from is not None and (created is None or created < created_from):
        return False
    if created_to is not None and (created is None or created > created_to):
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """True if the document passes every filter dimension of the request."""
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_contains_contents(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and matches_created_range(doc, request.created_from, request.created_to)
    )


def search(repo: DocumentRepo, request: SearchRequest | None = None) -> list[Document]:
    """Return all stored documents matching request. Result order is unspecified."""
    if request is None:
        request = SearchRequest()
    return [doc for doc in repo.all() if matches(doc, request)]
