"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.fixtures import load_documents
from docstore.logging_config import setup_logging
from docstore.manager import DocumentManager
from docstore.models import SearchRequest


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _manager(settings: Settings) -> DocumentManager:
    """Set up logging and return a manager populated from the configured fixture file."""
    setup_logging(settings.log_level)
    path = Path(settings.fixture_file)
    if not path.is_file():
        _fail(f"Fixture file not found: {path}")
    manager = DocumentManager()
    try:
        load_documents(manager.repo, path)
    except ValueError as e:
        _fail("Could not load documents", e)
    return manager


def _timestamp(value: Optional[str], option: str) -> Optional[datetime]:
    """Parse an ISO-8601 option value."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        _fail(f"Invalid {option} timestamp: {value!r}", e)


def search_cmd(
    file: Annotated[Optional[str], typer.Argument(help="YAML file of documents")] = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Match titles starting with this (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Match content containing this (repeatable)")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Match this author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Inclusive lower bound, ISO-8601")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Inclusive upper bound, ISO-8601")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Load documents and print those matching every supplied filter."""
    settings = _settings(overrides={"fixture_file": file, "log_level": log_level})
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=contains or None,
        author_ids=author_id or None,
        created_from=_timestamp(created_from, "--created-from"),
        created_to=_timestamp(created_to, "--created-to"),
    )
    manager = _manager(settings)
    results = manager.search(request)
    for doc in results:
        typer.echo(f"{doc.id}\t{doc.title or ''}")
    typer.echo(f"{len(results)} document(s) matched")


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    file: Annotated[Optional[str], typer.Option("--file", help="YAML file of documents")] = None,
    ):
    """Print a single document as JSON."""
    settings = _settings(overrides={"fixture_file": file})
    manager = _manager(settings)
    doc = manager.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id: {doc_id}", err=True)
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=2))
