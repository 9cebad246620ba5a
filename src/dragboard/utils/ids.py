"""Identifier generation."""

import uuid


def new_id() -> str:
    """Generate a fresh unique identifier."""
    return str(uuid.uuid4())
