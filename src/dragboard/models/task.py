"""Task domain model."""

from pydantic import BaseModel


class Task(BaseModel):
    """A content-bearing item that belongs to exactly one column."""

    id: str
    column_id: str  # Dynamic column id or one of the fixed ids
    content: str
