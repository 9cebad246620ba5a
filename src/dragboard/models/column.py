"""Column domain model."""

from pydantic import BaseModel

# Reserved ids for the pseudo-columns pinned to either side of the board
FIXED_LEFT_ID = "Cards"
FIXED_RIGHT_ID = "Elements"


class Column(BaseModel):
    """A named group of tasks on the board."""

    id: str
    title: str

    @property
    def is_fixed(self) -> bool:
        """Whether this is one of the always-present pseudo-columns."""
        return self.id in FIXED_COLUMN_IDS


FIXED_LEFT_COLUMN = Column(id=FIXED_LEFT_ID, title="Cards")
FIXED_RIGHT_COLUMN = Column(id=FIXED_RIGHT_ID, title="Elements")
FIXED_COLUMN_IDS = frozenset({FIXED_LEFT_ID, FIXED_RIGHT_ID})
