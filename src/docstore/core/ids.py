from uuid import uuid4


def new_id() -> str:
    """Return a fresh random identifier (UUID4 string)."""
    return str(uuid4())
